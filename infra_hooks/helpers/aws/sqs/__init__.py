from .sqs import SQSHelper, build_hooks, sqs_permissions, should_add_consumer, merge_properties
from .names import derive_names, apply_fifo_suffix
from .arns import derive_arns
