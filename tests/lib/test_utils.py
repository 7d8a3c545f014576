import pytest

from infra_hooks.lib.utils import camel_from_snake, kebab_case, split_words, title_case, upper_snake_case


@pytest.mark.parametrize(
    "value, expected",
    [
        ("name", "name"),
        ("main_queue_properties", "mainQueueProperties"),
        ("receive_message_wait_time_seconds", "receiveMessageWaitTimeSeconds"),
    ],
)
def test_camel_from_snake(value, expected):
    assert camel_from_snake(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("orderItem", ["order", "Item"]),
        ("order-item_v2", ["order", "item", "v2"]),
        ("HTTPRequest", ["HTTP", "Request"]),
        ("  Orders  ", ["Orders"]),
        ("---", []),
    ],
)
def test_split_words(value, expected):
    assert split_words(value) == expected


def test_cases():
    assert title_case("session-created") == "SessionCreated"
    assert kebab_case("SessionCreated") == "session-created"
    assert kebab_case("event_bus") == "event-bus"
    assert upper_snake_case("sessionCreated") == "SESSION_CREATED"
