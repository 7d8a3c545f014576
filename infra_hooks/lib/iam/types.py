from dataclasses import dataclass


@dataclass
class Statement:
    action: list[str]
    """AWS actions, ("sqs:SendMessage", "sqs:ReceiveMessage",...)"""

    resource: str
    """
    AWS resource pattern to apply this statement to.
    Usually holds orchestrator variables such as ``${aws:region}``, resolved at deploy time.
    """
