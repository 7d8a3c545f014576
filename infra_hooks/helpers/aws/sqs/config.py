from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class QueueRole(Enum):
    MAIN = "main_queue"
    """The queue the producers send to"""

    DELAY = "delay_queue"
    """Optional second chance between the main queue and the DLQ"""

    DLQ = "dlq"
    """Terminal dead-letter queue"""


@dataclass
class SQSHooksConfig:
    name: str
    """Base name of the queue family, every queue, function and variable name derives from it"""

    consumer_properties: Optional[dict] = None
    """Overrides for the main consumer function"""

    main_queue_properties: Optional[dict] = None
    """Overrides for the main queue. ``fifoQueue`` here switches every queue of the family to FIFO."""

    delay_consumer_properties: Optional[dict] = None
    """Overrides for the delay consumer function, defaults to the main consumer ones"""

    delay_queue_properties: Optional[dict] = None
    """Overrides for the delay queue. Setting it at all, even to ``{}``, creates the delay queue."""

    dlq_consumer_properties: Optional[dict] = None
    """Overrides for the DLQ consumer function. Setting it creates the DLQ consumer."""

    dlq_queue_properties: Optional[dict] = None
    """Overrides for the dead-letter queue"""


@dataclass(frozen=True)
class ConsumerProperties:
    timeout: Optional[int] = None
    """Function timeout in seconds"""

    handler: Optional[str] = None
    """Function handler. Defaults to ``{consumer_path}/{filename}-consumer.handler``."""

    description: Optional[str] = None

    batch_size: Optional[int] = None
    """Maximum number of messages per invocation"""

    maximum_batching_window: Optional[int] = None
    """Maximum seconds to gather messages before invoking"""

    prefix_path: Optional[str] = None
    """Directory prepended to the default handler filename"""

    use_main_handler: bool = False
    """Deliver this queue's messages to the main consumer instead of a dedicated function"""

    function_properties: Optional[dict[str, Any]] = field(default_factory=dict)
    """Merged into the function payload last"""

    raw_properties: Optional[dict[str, Any]] = field(default_factory=dict)
    """Merged into the function ``rawProperties``"""

    event_properties: Optional[dict[str, Any]] = field(default_factory=dict)
    """Merged into the queue event source"""

    extra_properties: dict[str, Any] = field(default_factory=dict)
    """Keys not known by this record, passed through to the function payload"""


@dataclass(frozen=True)
class QueueProperties:
    max_receive_count: Optional[int] = None
    """Receives before a message moves to the redrive target"""

    receive_message_wait_time_seconds: Optional[int] = None

    visibility_timeout: Optional[int] = None

    message_retention_period: Optional[int] = None

    delay_seconds: Optional[int] = None

    fifo_queue: bool = False
    """Only read from the main queue properties, switches the whole family to FIFO"""

    fifo_throughput_limit: Optional[str] = None
    """FIFO only. Valid values are perQueue and perMessageGroupId."""

    content_based_deduplication: bool = False
    """FIFO only"""

    deduplication_scope: Optional[str] = None
    """FIFO only. Valid values are messageGroup and queue."""

    add_tags: Optional[list[dict[str, str]]] = field(default_factory=list)
    """Tags appended after the generated ones"""

    generate_env_vars: bool = False
    """Expose the queue URL as an environment variable"""

    extra_properties: dict[str, Any] = field(default_factory=dict)
    """Keys not known by this record, passed through to the resource ``Properties``"""


@dataclass(frozen=True)
class DerivedNames:
    main_queue: str
    delay_queue: str
    dlq: str
    title_name: str
    """Base name in TitleCase, prefix of the function names"""

    filename: str
    """Base name in kebab-case, stem of the handler files"""

    env_var_name: str
    """Base name in UPPER_SNAKE_CASE, prefix of the environment variables"""


@dataclass(frozen=True)
class DerivedArns:
    main_queue: str
    delay_queue: str
    dlq: str


@dataclass(frozen=True)
class BuildContext:
    """Everything a single build derives from its config, computed before any descriptor is emitted"""

    names: DerivedNames
    arns: DerivedArns

    consumer: ConsumerProperties
    main_queue: QueueProperties
    delay_consumer: ConsumerProperties
    delay_queue: QueueProperties
    dlq_consumer: ConsumerProperties
    dlq: QueueProperties

    fifo_queue: bool
    use_delay_queue: bool
    add_delay_consumer: bool
    add_dlq_consumer: bool

    def queue_properties(self, role: QueueRole) -> QueueProperties:
        return getattr(self, role.value)

    def queue_name(self, role: QueueRole) -> str:
        return getattr(self.names, role.value)

    def queue_arn(self, role: QueueRole) -> str:
        return getattr(self.arns, role.value)
