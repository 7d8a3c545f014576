from enum import Enum
from pathlib import Path
from typing import Type

import yaml
from dacite import from_dict, Config, DaciteError
from pulumi import log

from infra_hooks.lib.errors import ConfigurationError
from infra_hooks.lib.types import ConfigType
from infra_hooks.lib.utils import camel_from_snake


def get_raw_helper_config(path: Path) -> dict:
    """Read a hook config file

    JSON files are read as well, JSON being a subset of YAML.

    :param path: Path to a YAML or JSON file
    :return: dict
    """
    with open(path) as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(str(path), f"Hook config in `{path}` is not valid YAML: {e}") from e

    log.debug(f"config dict from `{path}` is {config}")

    if not isinstance(config, dict):
        raise ConfigurationError(str(path), f"Hook config in `{path}` must be a mapping")

    return config


def get_helper_config(raw_config: dict, config_cls: Type[ConfigType], check_types: bool = True) -> ConfigType:
    """Get a hook config in dataclass form

    Uses `dacite <https://github.com/konradhalas/dacite>`_ to map dict to dataclass. Keys are expected in camelCase,
    fields are looked up by their snake_case name converted to camelCase. Unknown keys are ignored.

    :param raw_config: The config as written by the user
    :param config_cls: The dataclass for the config
    :param check_types: Reject values not matching the field type hints
    :return: The config expressed in the helper's config dataclass
    """
    try:
        config = from_dict(
            data_class=config_cls,
            data=raw_config,
            config=Config(
                cast=[Enum],
                check_types=check_types,
                convert_key=camel_from_snake,
            ),
        )
    except DaciteError as e:
        raise ConfigurationError(config_cls.__name__, f"Invalid {config_cls.__name__}: {e}") from e

    log.debug(f"config for `{config_cls.__name__}` is {config}")

    return config
