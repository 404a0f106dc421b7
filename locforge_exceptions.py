# -*- coding: utf-8 -*-
"""
LocForge Exceptions Module
Custom exception classes for structured error handling across the pipeline.
"""


class LocForgeError(Exception):
    """
    Base exception class for all LocForge-related errors.

    Attributes:
        message: Human-readable error message
        details: Optional additional details (dict, string, etc.)
    """

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Configuration Exceptions
# =============================================================================

class ConfigurationError(LocForgeError):
    """Raised before any remote call when the session is not usable."""
    pass


class MissingCredentialError(ConfigurationError):
    """Raised when the translation API key is missing."""
    pass


class MissingDatasetError(ConfigurationError):
    """Raised when no localization dataset is loaded or present on disk."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message, details={'file_path': file_path} if file_path else None)
        self.file_path = file_path


# =============================================================================
# Translation Exceptions
# =============================================================================

class TranslationError(LocForgeError):
    """Raised when a single translation call fails (non-success status)."""

    def __init__(self, message: str, source_text: str = None, target_lang: str = None,
                 status_code: int = None):
        details = {'target_lang': target_lang}
        if status_code is not None:
            details['status_code'] = status_code
        super().__init__(message, details=details)
        self.source_text = source_text
        self.target_lang = target_lang
        self.status_code = status_code


class NetworkError(TranslationError):
    """Raised on transport failures: connection errors and timeouts."""
    pass


class ResponseParseError(TranslationError):
    """Raised when the response is malformed or carries zero translations."""
    pass


# =============================================================================
# Dataset Exceptions
# =============================================================================

class DatasetError(LocForgeError):
    """Base exception for dataset persistence errors."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message, details={'file_path': file_path})
        self.file_path = file_path


class DatasetLoadError(DatasetError):
    """Raised when the dataset file exists but cannot be read."""
    pass


class DatasetSaveError(DatasetError):
    """Raised when writing the dataset file fails."""
    pass


# =============================================================================
# Scene Exceptions
# =============================================================================

class SceneError(LocForgeError):
    """Base exception for scene document errors."""
    pass


class SceneLoadError(SceneError):
    """Raised when a scene document cannot be read or is malformed."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message, details={'file_path': file_path})
        self.file_path = file_path


# =============================================================================
# Settings Exceptions
# =============================================================================

class SettingsError(LocForgeError):
    """Base exception for settings-related errors."""
    pass


class SettingsLoadError(SettingsError):
    """Raised when loading settings fails."""
    pass


class SettingsSaveError(SettingsError):
    """Raised when saving settings fails."""
    pass
