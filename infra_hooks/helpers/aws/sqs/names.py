from infra_hooks.lib.errors import InvalidNameError
from infra_hooks.lib.utils import title_case, kebab_case, upper_snake_case
from .config import DerivedNames

FIFO_SUFFIX = ".fifo"


def derive_names(base_name: str) -> DerivedNames:
    """Derive every name of a queue family from its base name

    Example::

        derive_names("order-item")
        # DerivedNames(main_queue="OrderItemQueue", delay_queue="OrderItemDelayQueue", dlq="OrderItemDLQ",
        #              title_name="OrderItem", filename="order-item", env_var_name="ORDER_ITEM")

    :param base_name: Name of the queue family
    :return: The derived names
    """
    title_name = title_case(base_name)

    if not title_name:
        raise InvalidNameError("title_name", base_name)

    return DerivedNames(
        main_queue=f"{title_name}Queue",
        delay_queue=f"{title_name}DelayQueue",
        dlq=f"{title_name}DLQ",
        title_name=title_name,
        filename=kebab_case(base_name),
        env_var_name=upper_snake_case(base_name),
    )


def apply_fifo_suffix(name: str, is_fifo: bool) -> str:
    """Add the reserved FIFO suffix to a queue name, once

    :param name: Queue name, with or without the suffix
    :param is_fifo: Whether the queue is a FIFO queue
    :return: The queue name AWS expects
    """
    if not is_fifo or name.endswith(FIFO_SUFFIX):
        return name

    return f"{name}{FIFO_SUFFIX}"
