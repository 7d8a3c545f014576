import pytest

from infra_hooks.helpers.aws.sqs import derive_arns, derive_names
from infra_hooks.helpers.aws.sqs.config import DerivedNames
from infra_hooks.lib.config import base_arn, service_name
from infra_hooks.lib.errors import InvalidNameError


def test_standard_arns():
    arns = derive_arns(derive_names("Orders"), False)

    assert arns.main_queue == f"{base_arn}:{service_name}OrdersQueue"
    assert arns.delay_queue == f"{base_arn}:{service_name}OrdersDelayQueue"
    assert arns.dlq == f"{base_arn}:{service_name}OrdersDLQ"


def test_fifo_arns():
    arns = derive_arns(derive_names("Orders"), True)

    assert arns.main_queue == f"{base_arn}:{service_name}OrdersQueue.fifo"
    assert arns.delay_queue == f"{base_arn}:{service_name}OrdersDelayQueue.fifo"
    assert arns.dlq == f"{base_arn}:{service_name}OrdersDLQ.fifo"


def test_empty_queue_name_is_rejected():
    names = DerivedNames(
        main_queue="OrdersQueue",
        delay_queue="OrdersDelayQueue",
        dlq="",
        title_name="Orders",
        filename="orders",
        env_var_name="ORDERS",
    )

    with pytest.raises(InvalidNameError) as e:
        derive_arns(names, False)

    assert e.value.role == "dlq"
