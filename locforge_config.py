from pathlib import Path

VERSION = "0.4.0"

# =============================================================================
# KEYS
# =============================================================================

LOC_KEY_PREFIX = "LOC_"
KEY_STEM_MAX_LENGTH = 30        # "LOC_" + hint, before the numeric suffix
KEY_HASH_BUCKETS = 1000         # numeric suffix range 0-999
KEY_EMPTY_HINT = "TEXT"
DEFAULT_INCLUDE_SCENE_IN_KEY = False

# =============================================================================
# TRANSLATION
# =============================================================================

DEEPL_API_URL_FREE = "https://api-free.deepl.com/v2/translate"
DEEPL_API_URL_PRO = "https://api.deepl.com/v2/translate"
DEEPL_FREE_KEY_SUFFIX = ":fx"

SOURCE_LANGUAGE = "EN"
DEFAULT_TARGET_LANGUAGES = ["ES", "FR"]
REQUEST_TIMEOUT_SECONDS = 30

DEFAULT_ENGINE_ID = "locforge.engine.deepl"
AUTH_KEY_ENV_VAR = "DEEPL_AUTH_KEY"

# =============================================================================
# SCRIPT SCANNER
# =============================================================================

SCRIPT_FILE_EXTENSIONS = (".cs",)
# Editor-only code and the localization tooling itself
SCRIPT_EXCLUDE_MARKERS = ("Editor", "Tools/Localization")
SCRIPT_COMMENT_PREFIXES = ("//", "/*")
SCRIPT_LOG_MARKERS = ("Debug.Log",)
SCRIPT_MIN_LITERAL_LENGTH = 3
SCRIPT_IGNORED_STRINGS = frozenset({
    "", " ", "Text", "Image", "Button", "Player", "GameManager", "Untagged", "Default",
})
DEFAULT_SCRIPTS_SUBDIR = "Scripts"

# =============================================================================
# PATHS
# =============================================================================

DEFAULT_DATASET_PATH = Path("localization_data.json")
DATASET_FORMAT_VERSION = 1

SETTINGS_DIR = Path.home() / ".locforge"
SETTINGS_FILE_PATH = SETTINGS_DIR / "settings.json"

__all__ = [
    "VERSION",
    "LOC_KEY_PREFIX", "KEY_STEM_MAX_LENGTH", "KEY_HASH_BUCKETS", "KEY_EMPTY_HINT",
    "DEFAULT_INCLUDE_SCENE_IN_KEY",
    "DEEPL_API_URL_FREE", "DEEPL_API_URL_PRO", "DEEPL_FREE_KEY_SUFFIX",
    "SOURCE_LANGUAGE", "DEFAULT_TARGET_LANGUAGES", "REQUEST_TIMEOUT_SECONDS",
    "DEFAULT_ENGINE_ID", "AUTH_KEY_ENV_VAR",
    "SCRIPT_FILE_EXTENSIONS", "SCRIPT_EXCLUDE_MARKERS", "SCRIPT_COMMENT_PREFIXES",
    "SCRIPT_LOG_MARKERS", "SCRIPT_MIN_LITERAL_LENGTH", "SCRIPT_IGNORED_STRINGS",
    "DEFAULT_SCRIPTS_SUBDIR",
    "DEFAULT_DATASET_PATH", "DATASET_FORMAT_VERSION",
    "SETTINGS_DIR", "SETTINGS_FILE_PATH",
]

# Import logger at the end to avoid circular imports
from locforge_logger import get_logger
_logger = get_logger("config")
_logger.debug("locforge_config.py loaded")
