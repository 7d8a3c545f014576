from enum import Enum
from typing import Any, NamedTuple, TypeVar

ConfigType = TypeVar("ConfigType")
"""The dataclass a helper's ``build`` method accepts"""


class DescriptorKind(str, Enum):
    IAM_STATEMENT = "iamStatement"
    """An IAM statement the deployed functions need"""

    ENV_VARS = "envVars"
    """Environment variables shared by every function of the service"""

    FUNCTION = "function"
    """A function definition"""

    RESOURCE = "resource"
    """A raw template resource"""


class Descriptor(NamedTuple):
    """
    A single hook handed to the orchestrator. Behaves like the ``(kind, payload)`` pair it wraps.
    """

    kind: DescriptorKind
    payload: dict[str, Any]


HooksType = list[Descriptor]
"""What a helper returns: an ordered list of descriptors"""
