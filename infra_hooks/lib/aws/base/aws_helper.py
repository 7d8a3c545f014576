from abc import ABC

from infra_hooks.lib.base import BaseHelper


class AWSHelper(BaseHelper, ABC):
    """
    Base class for hooks helpers deriving AWS resources
    """

    provider: str = "aws"
