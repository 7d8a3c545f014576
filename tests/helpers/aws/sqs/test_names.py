import pytest

from infra_hooks.helpers.aws.sqs import derive_names, apply_fifo_suffix
from infra_hooks.helpers.aws.sqs.config import DerivedNames
from infra_hooks.lib.errors import InvalidNameError


class TestDeriveNames:
    def test_single_word(self):
        assert derive_names("Orders") == DerivedNames(
            main_queue="OrdersQueue",
            delay_queue="OrdersDelayQueue",
            dlq="OrdersDLQ",
            title_name="Orders",
            filename="orders",
            env_var_name="ORDERS",
        )

    def test_kebab_name(self):
        assert derive_names("order-item") == DerivedNames(
            main_queue="OrderItemQueue",
            delay_queue="OrderItemDelayQueue",
            dlq="OrderItemDLQ",
            title_name="OrderItem",
            filename="order-item",
            env_var_name="ORDER_ITEM",
        )

    @pytest.mark.parametrize("name", ["orderItem", "OrderItem", "order_item", "order item"])
    def test_camel_and_separated_names_agree(self, name):
        names = derive_names(name)

        assert names.title_name == "OrderItem"
        assert names.filename == "order-item"
        assert names.env_var_name == "ORDER_ITEM"

    def test_acronyms_and_digits(self):
        names = derive_names("SAPInvoice-v2")

        assert names.title_name == "SAPInvoiceV2"
        assert names.filename == "sap-invoice-v2"
        assert names.env_var_name == "SAP_INVOICE_V2"

    @pytest.mark.parametrize("name", ["Orders", "session-created", "a", "HTTPRequest", "stock_2024"])
    def test_every_role_is_set(self, name):
        names = derive_names(name)

        assert all(
            [
                names.main_queue,
                names.delay_queue,
                names.dlq,
                names.title_name,
                names.filename,
                names.env_var_name,
            ]
        )

    def test_deterministic(self):
        assert derive_names("session-created") == derive_names("session-created")

    def test_distinct_bases_do_not_collide(self):
        assert derive_names("orders").main_queue != derive_names("invoices").main_queue

    @pytest.mark.parametrize("name", ["---", "   ", "_", "!!"])
    def test_names_without_words_are_rejected(self, name):
        with pytest.raises(InvalidNameError) as e:
            derive_names(name)

        assert e.value.role == "title_name"


class TestApplyFifoSuffix:
    def test_adds_suffix(self):
        assert apply_fifo_suffix("OrdersQueue", True) == "OrdersQueue.fifo"

    def test_standard_queue_is_unchanged(self):
        assert apply_fifo_suffix("OrdersQueue", False) == "OrdersQueue"

    def test_idempotent(self):
        once = apply_fifo_suffix("OrdersQueue", True)

        assert apply_fifo_suffix(once, True) == once
        assert once.count(".fifo") == 1
