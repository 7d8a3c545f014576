from dataclasses import asdict

from infra_hooks.lib.config import base_arn
from infra_hooks.lib.types import Descriptor, DescriptorKind
from ..types import Statement


def generate_sqs_statement() -> Descriptor:
    """
    Generate the statement that allows the service functions to work with its own queues.

        Grants access to:
            sqs:SendMessage
            sqs:DeleteMessage
            sqs:ReceiveMessage
            sqs:GetQueueAttributes

    Scoped to every queue of the account and region, the queue names are only known at deploy time.

    :return: An ``iamStatement`` descriptor
    """
    statement = Statement(
        action=[
            "sqs:SendMessage",
            "sqs:DeleteMessage",
            "sqs:ReceiveMessage",
            "sqs:GetQueueAttributes",
        ],
        resource=f"{base_arn}:*",
    )

    return Descriptor(DescriptorKind.IAM_STATEMENT, asdict(statement))
