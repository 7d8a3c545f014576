from infra_hooks.lib.config import base_arn, service_name
from infra_hooks.lib.errors import InvalidNameError
from .config import DerivedArns, DerivedNames, QueueRole
from .names import apply_fifo_suffix


def derive_arns(names: DerivedNames, is_fifo: bool) -> DerivedArns:
    """Derive the ARN of every queue of a family

    :param names: The derived names of the family
    :param is_fifo: Whether the family uses FIFO queues
    :return: The derived ARNs
    """
    arns = {}

    for role in QueueRole:
        name = getattr(names, role.value)

        if not name:
            raise InvalidNameError(role.value, name)

        arns[role.value] = f"{base_arn}:{service_name}{apply_fifo_suffix(name, is_fifo)}"

    return DerivedArns(**arns)
