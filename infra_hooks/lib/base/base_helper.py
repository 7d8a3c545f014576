from abc import ABC, abstractmethod
from functools import cache
from typing import Type, get_type_hints

from pulumi import log

from infra_hooks.lib.types import ConfigType, HooksType
from infra_hooks.lib.config import get_helper_config


class BaseHelper(ABC):
    """
    The base class for a hooks helper
    """

    @property
    @abstractmethod
    def provider(self):
        """Name of the provider"""

    @classmethod
    @cache
    def get_config_type(cls) -> Type[ConfigType]:
        try:
            return get_type_hints(cls.build)["config"]
        except KeyError:
            raise TypeError(f"helper `build` method does not have a type hint for the `config` param")

    @classmethod
    def permissions(cls) -> HooksType:
        """Static IAM statements the resources of this helper need, independent of any build

        :return: A list of ``iamStatement`` descriptors
        """
        return []

    def validate(self, raw_config: dict) -> None:
        """Reject a raw config before it is mapped onto the config dataclass

        Helpers raise ``ConfigurationError`` from here; the default accepts anything.
        """

    def run(self, raw_config: dict) -> HooksType:
        """Execute the helper

        :param raw_config: The hook config as written by the user
        :return: An ordered list of descriptors
        """
        self.validate(raw_config)

        config = get_helper_config(raw_config, self.get_config_type())

        hooks = self.build(config)

        log.debug(f"helper `{self.__class__.__name__}` built {len(hooks)} hooks")

        return hooks

    @abstractmethod
    def build(self, config: get_config_type) -> HooksType:
        """Derive the descriptors

        :return: An ordered list of descriptors
        """
