import inspect
from dataclasses import dataclass
from functools import cached_property
from importlib import import_module
from types import ModuleType
from typing import Type

from pulumi import log

from infra_hooks.lib.base import BaseHelper
from infra_hooks.lib.types import HooksType


@dataclass
class LazyHelper:
    """
    Wraps a hooks helper.
    Accepts a path that has been identified as a helper package.
    Defers import until the helper class is needed.
    """

    provider: str
    """Name of the provider"""

    name: str
    """Name of the python package"""

    @property
    def path(self) -> str:
        return f".helpers.{self.provider}.{self.name}"

    def _find_helper_in_dir(self, helper_dir: ModuleType) -> Type[BaseHelper]:
        for key, value in vars(helper_dir).items():
            if not key.startswith("_"):
                if isinstance(value, type) and issubclass(value, BaseHelper) and not inspect.isabstract(value):
                    log.debug(f"found helper class `{value.__name__}`")

                    return value

        raise ModuleNotFoundError(f"no subclass of `{BaseHelper.__name__}` found in `{self.path}`")

    @cached_property
    def Helper(self) -> Type[BaseHelper]:
        log.debug(f"performing first-time import for helper at `infra_hooks{self.path}`")

        helper_dir = import_module(self.path, "infra_hooks")

        return self._find_helper_in_dir(helper_dir)

    def run(self, raw_config: dict) -> HooksType:
        """Invoke a helper with a hook config

        :param raw_config: The hook config as written by the user
        :return: An ordered list of descriptors
        """
        log.debug(f"running helper `{self.name}` for provider `{self.provider}`")

        return self.Helper().run(raw_config)

    def permissions(self) -> HooksType:
        return self.Helper.permissions()
