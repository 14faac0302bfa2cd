import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from cerberus import Validator
from pydantic import ValidationError

from retirement_projection.config.models import HouseholdConfig

# Configure logger for this module
logger = logging.getLogger(__name__)

# Top-level layout of a household file. Field-level checks live in the Pydantic models.
HOUSEHOLD_SCHEMA: Dict[str, Any] = {
    "shared": {"type": "dict", "required": False, "nullable": True},
    "users": {
        "type": "dict",
        "required": True,
        "keysrules": {"type": "string"},
        "valuesrules": {
            "type": "dict",
            "nullable": True,
            "schema": {
                "retirement": {"type": "dict", "required": False, "nullable": True},
                "paycheck": {"type": "dict", "required": False, "nullable": True},
            },
        },
    },
    "active_users": {"type": "list", "required": False, "nullable": True, "schema": {"type": "string"}},
    "portfolio": {
        "type": "list",
        "required": False,
        "nullable": True,
        "schema": {
            "type": "dict",
            "schema": {
                "updated_at": {"type": ["datetime", "date", "string"], "required": True},
                "records": {"type": "list", "required": False, "schema": {"type": "dict"}},
            },
        },
    },
    "performance": {"type": "list", "required": False, "nullable": True, "schema": {"type": "dict"}},
    "as_of": {"type": ["date", "string"], "required": False, "nullable": True},
}


class ConfigLoadError(Exception):
    """Custom exception for errors during config loading."""

    pass


def load_yaml_config(config_path: Path) -> Optional[Dict[str, Any]]:
    """
    Loads configuration data from a YAML file.

    Args:
        config_path: Path object pointing to the YAML configuration file.

    Returns:
        A dictionary containing the loaded configuration.

    Raises:
        ConfigLoadError: If the file cannot be found or parsed.
    """
    if not isinstance(config_path, Path):
        config_path = Path(config_path)

    logger.info(f"Attempting to load configuration from: {config_path}")

    if not config_path.is_file():
        logger.error(f"Configuration file not found at path: {config_path}")
        raise ConfigLoadError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.exception(f"Error parsing YAML configuration file {config_path}: {e}")
        raise ConfigLoadError(f"Error parsing YAML file {config_path}") from e
    except OSError as e:
        logger.exception(f"Could not read configuration file {config_path}: {e}")
        raise ConfigLoadError(f"Could not read configuration file {config_path}") from e

    if not isinstance(config_data, dict):
        logger.error(f"Configuration file {config_path} did not parse into a dictionary.")
        raise ConfigLoadError(
            f"Invalid configuration format in {config_path}: Expected a dictionary."
        )

    logger.info(f"Successfully loaded configuration from {config_path}")
    return config_data


def _drop_nulls(config_data: Dict[str, Any]) -> Dict[str, Any]:
    """Empty YAML sections (``shared:`` with nothing under it) mean 'use defaults'."""
    cleaned = {k: v for k, v in config_data.items() if v is not None}
    users = cleaned.get("users") or {}
    cleaned["users"] = {
        user_id: {k: v for k, v in (inputs or {}).items() if v is not None}
        for user_id, inputs in users.items()
    }
    return cleaned


def parse_household_config(config_data: Dict[str, Any]) -> HouseholdConfig:
    """
    Validates a raw household mapping and builds the HouseholdConfig.
    Raises ConfigLoadError on schema or model errors.
    """
    v = Validator(HOUSEHOLD_SCHEMA)
    if not v.validate(config_data):
        raise ConfigLoadError(f"Config validation failed: {v.errors}")

    try:
        household = HouseholdConfig.model_validate(_drop_nulls(config_data))
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid household configuration: {e}") from e

    logger.debug(
        f"Household loaded: users={list(household.users)}, active={household.active_users}, "
        f"portfolio_sets={len(household.portfolio)}, performance_records={len(household.performance)}"
    )
    return household


def load_household_config(config_path: Path) -> HouseholdConfig:
    """Loads YAML, validates its layout with cerberus and its content with Pydantic."""
    config_data = load_yaml_config(config_path)
    if config_data is None:
        raise ConfigLoadError(f"No config at {config_path}")
    return parse_household_config(config_data)


# Expose for import
__all__ = [
    "load_yaml_config",
    "load_household_config",
    "parse_household_config",
    "ConfigLoadError",
    "HOUSEHOLD_SCHEMA",
]
