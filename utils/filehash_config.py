"""
Configuration utilities for loading filehash config files and environment overrides.
"""
import configparser
import os
from typing import Any, Dict, List

DEFAULT_CONFIG_PATH = './config/filehash_config.ini'

# Environment variable mapping: env_var -> (section, key)
ENV_VAR_MAPPING = {
    'FILEHASH_LOGGING_VERBOSITY': ('logging', 'verbosity'),
    'FILEHASH_LOGGING_LOGFILE': ('logging', 'logfile'),
}


def load_configuration(path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Dict[str, Any]]:
    """
    Load the configuration file, normalize names and apply environment overrides.

    A missing file yields an empty configuration, so defaults apply.

    Args:
        path (str): Path to the configuration file.

    Returns:
        Dict[str, Dict[str, Any]]: Sections and keys in lowercase.
    """
    parser = configparser.ConfigParser()
    parser.read(path)
    return apply_env_overrides(normalize_config(parser))


def normalize_config(parser: configparser.ConfigParser) -> Dict[str, Dict[str, Any]]:
    """
    Lowercase section names and merge sections that differ only by case.

    ConfigParser already lowercases keys. When the same section appears in
    several casings, the lowercase spelling wins.
    """
    normalized: Dict[str, Dict[str, Any]] = {}
    for section_name in parser.sections():
        canonical = section_name.lower()
        section_data = {key.lower(): value for key, value in parser[section_name].items()}
        if canonical in normalized:
            if section_name.islower():
                normalized[canonical].update(section_data)
            else:
                for key, value in section_data.items():
                    normalized[canonical].setdefault(key, value)
        else:
            normalized[canonical] = section_data
    return normalized


def active_env_overrides() -> List[str]:
    """Names of the FILEHASH_* environment variables currently set."""
    return [env_var for env_var in ENV_VAR_MAPPING if os.getenv(env_var) is not None]


def apply_env_overrides(config: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """Return a copy of ``config`` with FILEHASH_* environment variables applied."""
    overridden = {section: data.copy() for section, data in config.items()}
    for env_var in active_env_overrides():
        section, key = ENV_VAR_MAPPING[env_var]
        overridden.setdefault(section, {})[key] = os.getenv(env_var)
    return overridden


def get_config_value(
    config: Dict[str, Dict[str, Any]],
    section: str,
    key: str,
    fallback: Any = None,
    value_type: type = str
) -> Any:
    """
    Get a configuration value with case-insensitive lookup and type conversion.

    Args:
        config: Normalized configuration dict
        section: Configuration section name
        key: Configuration key name
        fallback: Default value if not found or empty
        value_type: Type to convert the value to (str, int, float, bool)

    Returns:
        Configuration value converted to specified type or fallback

    Raises:
        ValueError: If value cannot be converted to specified type
    """
    if config is None:
        return fallback

    value = config.get(section.strip().lower(), {}).get(key.strip().lower())
    if value is None or (isinstance(value, str) and not value.strip()):
        return fallback

    try:
        if value_type == bool and isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on', 'enabled')
        return value_type(value)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"Invalid value for [{section}] {key}: {value!r} is not a valid {value_type.__name__}"
        ) from e
