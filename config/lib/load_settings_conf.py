"""Settings configuration loader module.

This module handles loading and parsing of the main settings.conf file which contains
the upstream subgraph endpoint and the HTTP server settings.

The settings file uses INI format with a [DEFAULT] section containing key-value pairs.

Recognised settings:
    subgraph_endpoint: GraphQL endpoint of the marketplace subgraph
    host: Interface the API server binds to
    port: Port the API server listens on
    request_timeout: Timeout in seconds for each upstream query
    log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

Example settings.conf:
    [DEFAULT]
    subgraph_endpoint = https://api.studio.thegraph.com/query/48381/nftmarketplace/version/latest
    host = 127.0.0.1
    port = 8085

Raises:
    SettingsError: If the settings file is missing, invalid, or fails validation
"""
from configparser import ConfigParser
from pathlib import Path
from typing import Dict, Any, List
from urllib.parse import urlparse

class ConfigValidationError:
    """Helper class to format configuration validation errors"""
    def __init__(self):
        self.missing: List[str] = []
        self.invalid_values: List[str] = []

    def has_errors(self) -> bool:
        """Check if any errors exist"""
        return bool(self.missing or self.invalid_values)

    def format_message(self) -> str:
        """Format error message in a clean, readable way"""
        messages = []

        if self.missing:
            messages.append("Missing required settings:")
            messages.extend(f"  - {item}" for item in self.missing)

        if self.invalid_values:
            if messages:
                messages.append("")
            messages.append("Invalid values:")
            messages.extend(f"  - {item}" for item in self.invalid_values)

        return "\n".join(messages)

class SettingsError(Exception):
    """Raised when there are issues loading or parsing the settings configuration."""
    pass

# Default settings
DEFAULTS = {
    'subgraph_endpoint': 'https://api.studio.thegraph.com/query/48381/nftmarketplace/version/latest',
    'host': '127.0.0.1',
    'port': '8085',
    'request_timeout': '10',  # Seconds per upstream query
    'log_level': 'INFO'
}

LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}

def load_settings_conf(settings_path: str = ".") -> Dict[str, Any]:
    """Load and parse settings.conf file

    Settings absent from the file fall back to DEFAULTS.

    Args:
        settings_path: Directory containing settings.conf

    Returns:
        Dictionary containing raw (string) settings

    Raises:
        SettingsError: If file not found or parsing fails
    """
    config_path = Path(settings_path) / 'settings.conf'

    if not config_path.exists():
        raise SettingsError(
            f"Settings file not found at: {config_path}\n"
            "Please create settings.conf based on examples/settings.conf.example"
        )

    try:
        parser = ConfigParser(defaults=DEFAULTS)
        parser.read(config_path)
        return dict(parser['DEFAULT'])
    except Exception as e:
        raise SettingsError(f"Error parsing settings.conf: {str(e)}")

def validate_settings(settings: Dict[str, Any]) -> Dict[str, Any]:
    """Validate loaded settings.

    Args:
        settings: Dictionary of settings to validate

    Returns:
        Validated and processed settings

    Raises:
        SettingsError: If validation fails
    """
    errors = ConfigValidationError()

    missing = [key for key in DEFAULTS if not settings.get(key)]
    if missing:
        errors.missing.extend(missing)
        raise SettingsError(
            "Settings Configuration Validation Failed\n\n" +
            errors.format_message()
        )

    validated = dict(settings)

    endpoint = urlparse(settings['subgraph_endpoint'])
    if endpoint.scheme not in ('http', 'https') or not endpoint.netloc:
        errors.invalid_values.append(
            f"subgraph_endpoint: {settings['subgraph_endpoint']} (must be an http(s) URL)"
        )

    try:
        validated['port'] = int(settings['port'])
        if not 1 <= validated['port'] <= 65535:
            errors.invalid_values.append(f"port: {settings['port']} (must be between 1 and 65535)")
    except ValueError:
        errors.invalid_values.append(f"port: {settings['port']} (must be an integer)")

    try:
        validated['request_timeout'] = float(settings['request_timeout'])
        if validated['request_timeout'] <= 0:
            errors.invalid_values.append(
                f"request_timeout: {settings['request_timeout']} (must be greater than 0)"
            )
    except ValueError:
        errors.invalid_values.append(f"request_timeout: {settings['request_timeout']} (must be a number)")

    validated['log_level'] = settings['log_level'].upper()
    if validated['log_level'] not in LOG_LEVELS:
        errors.invalid_values.append(
            f"log_level: {settings['log_level']} (must be one of {', '.join(sorted(LOG_LEVELS))})"
        )

    if errors.has_errors():
        raise SettingsError(
            "Settings Configuration Validation Failed\n\n" +
            errors.format_message()
        )

    return validated
