from pulumi import log

from .discover_helpers import discover_helpers
from .lazy_helper import LazyHelper


class _HelperManager:
    """Stores and hands out hooks helpers."""

    def __init__(self):
        """Initialize the helper manager

        The ``helpers`` instance attribute would look like::

            {
                "aws": {
                    "sqs": LazyHelper(provider='aws', name='sqs'),
                },
            }
        """
        self.helpers = discover_helpers()

        log.debug(f"discovered helpers `{self.helpers}`")

    def get_helper(self, provider: str, helper_name: str) -> LazyHelper:
        """Returns the helper without importing it.

        :param provider: Provider name
        :param helper_name: Helper name
        :return: A LazyHelper
        """
        try:
            lazy_helper = self.helpers[provider][helper_name]

            log.debug(f"accessing helper `{lazy_helper}`")

            return lazy_helper
        except KeyError:
            raise ModuleNotFoundError(f"helper `{helper_name}` was not found under provider `{provider}`")

    def get_all_helpers(self) -> dict[str, dict[str, LazyHelper]]:
        """Helper function used to return the dictionary of known helpers

        :return: The full collection of helpers
        """
        return self.helpers


helper_manager = _HelperManager()
