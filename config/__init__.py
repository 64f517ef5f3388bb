"""Configuration module for loading and managing application settings"""
from typing import Dict, Any
from .lib.load_settings_conf import (
    load_settings_conf, validate_settings, SettingsError, DEFAULTS
)

__all__ = ['load_config', 'load_settings_conf', 'validate_settings', 'SettingsError', 'DEFAULTS']

def load_config(settings_path: str = ".") -> Dict[str, Any]:
    """Load and validate settings.conf.

    Args:
        settings_path: Directory containing settings.conf

    Returns:
        Validated settings with numeric values converted

    Raises:
        SettingsError: If the file is missing or a setting is invalid
    """
    try:
        return validate_settings(load_settings_conf(settings_path))
    except SettingsError as e:
        # Re-raise the error but provide more context
        raise SettingsError(
            f"Configuration Error\n"
            "=================\n\n"
            f"{str(e)}\n\n"
            "Please ensure settings.conf is properly configured.\n"
            "Run `python -m config` to generate examples/settings.conf.example."
        ) from e
