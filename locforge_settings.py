"""
LocForge Settings Module
Handles loading and saving of tool settings.
"""

import json
import os
import locforge_config as config
from locforge_exceptions import SettingsSaveError
from locforge_logger import get_logger
logger = get_logger("settings")


def get_default_settings():
    return {
        "auth_key": "",
        "dataset_path": str(config.DEFAULT_DATASET_PATH),
        "target_languages": list(config.DEFAULT_TARGET_LANGUAGES),
        "active_engine": config.DEFAULT_ENGINE_ID,
        "request_timeout": config.REQUEST_TIMEOUT_SECONDS,
        "include_scene_in_key": config.DEFAULT_INCLUDE_SCENE_IN_KEY,
    }


def _validate(settings, default_settings):
    if not isinstance(settings.get("auth_key"), str):
        logger.warning("Invalid 'auth_key' value. Using empty credential.")
        settings["auth_key"] = ""

    if not isinstance(settings.get("dataset_path"), str) or not settings["dataset_path"].strip():
        logger.warning(f"Invalid 'dataset_path' value ({settings.get('dataset_path')!r}). Using default.")
        settings["dataset_path"] = default_settings["dataset_path"]

    languages = settings.get("target_languages")
    if (not isinstance(languages, list) or not languages
            or not all(isinstance(code, str) and code.strip() for code in languages)):
        logger.warning(f"Invalid 'target_languages' value ({languages!r}). Using default.")
        settings["target_languages"] = default_settings["target_languages"]
    else:
        settings["target_languages"] = [code.strip().upper() for code in languages]

    if not isinstance(settings.get("active_engine"), str) or not settings["active_engine"]:
        logger.warning("Invalid 'active_engine' value. Using default.")
        settings["active_engine"] = default_settings["active_engine"]

    timeout = settings.get("request_timeout")
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        logger.warning(f"Invalid 'request_timeout' value ({timeout!r}). Using default.")
        settings["request_timeout"] = default_settings["request_timeout"]

    if not isinstance(settings.get("include_scene_in_key"), bool):
        logger.warning("Invalid 'include_scene_in_key' value. Using default.")
        settings["include_scene_in_key"] = default_settings["include_scene_in_key"]

    return settings


def load_settings():
    """Load settings from JSON file, or return defaults if not found.

    The DEEPL_AUTH_KEY environment variable overrides the stored credential.
    """

    settings_file = config.SETTINGS_FILE_PATH
    default_settings = get_default_settings()
    settings = default_settings.copy()

    if not settings_file.is_file():
        logger.info(f"Settings file not found ({settings_file}). Using defaults.")
    else:
        try:
            logger.debug(f"Loading settings: {settings_file}")
            with settings_file.open('r', encoding='utf-8') as f:
                loaded_data = json.load(f)

            if isinstance(loaded_data, dict):
                settings.update(loaded_data)
                settings = _validate(settings, default_settings)
            else:
                logger.warning("Settings file format is invalid (not a dict). Using defaults.")
                settings = default_settings.copy()

            logger.debug("Settings loaded.")
        except json.JSONDecodeError:
            logger.error(f"Settings file ({settings_file}) is corrupt (invalid JSON). Using defaults.")
            settings = default_settings.copy()
        except OSError as e:
            logger.error(f"Error while loading settings ({settings_file}): {e}. Using defaults.")
            settings = default_settings.copy()

    env_key = os.environ.get(config.AUTH_KEY_ENV_VAR)
    if env_key:
        settings["auth_key"] = env_key.strip()

    return settings


def save_settings(settings_data):
    """Save settings to JSON file."""

    settings_file = config.SETTINGS_FILE_PATH
    try:
        logger.debug(f"Saving settings: {settings_file}")
        settings_file.parent.mkdir(parents=True, exist_ok=True)

        with settings_file.open('w', encoding='utf-8') as f:
            json.dump(settings_data, f, indent=4, ensure_ascii=False)
        logger.info("Settings saved.")
    except (OSError, TypeError) as e:
        logger.critical(f"Could not save settings ({settings_file}): {e}")
        raise SettingsSaveError(f"Could not save settings: {e}") from e


logger.debug("locforge_settings.py loaded")
