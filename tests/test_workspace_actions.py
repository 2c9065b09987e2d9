from __future__ import annotations

import re
from datetime import datetime

import pytest

from bank_chat_client.card_catalog import CARD_CATALOG, select_cards
from bank_chat_client.domain_types import (
    AgentMessage,
    AppointmentMessage,
    BalanceMessage,
    CreditCardMessage,
    NotificationMessage,
    StatementMessage,
    UnrecognizedAction,
)
from bank_chat_client.workspace_actions import (
    WORKSPACE_ACTION_KEYS,
    classify_workspace_action,
    format_time_of_day,
    messages_to_dicts,
    normalize_workspace_actions,
    renderable_messages,
)


def _fixed_clock(moment: datetime):
    return lambda: moment


def test_card_catalog_is_fixed() -> None:
    assert [c.id for c in CARD_CATALOG] == [0, 1, 2, 3, 4]
    assert CARD_CATALOG[1].card_name == "The Mega Saver"


def test_select_cards_keeps_catalog_order() -> None:
    cards = select_cards(["General Rewards", "Travel Rewards"])
    assert [c.id for c in cards] == [0, 4]


def test_selected_display_filters_catalog() -> None:
    [message] = normalize_workspace_actions({"cc_selecteddisplay": {"CardCriteria": ["Travel Rewards", "Saving"]}})
    assert isinstance(message, CreditCardMessage)
    assert list(message.content) == [CARD_CATALOG[0], CARD_CATALOG[1]]


def test_selected_display_without_criteria_is_empty() -> None:
    [message] = normalize_workspace_actions({"cc_selecteddisplay": {}})
    assert isinstance(message, CreditCardMessage)
    assert message.content == ()


def test_notification_without_url_has_no_link() -> None:
    [message] = normalize_workspace_actions({"notification_display": {"DisplayText": "Hi"}})
    assert message == NotificationMessage(text="Hi", link=None)


def test_notification_with_url() -> None:
    [message] = normalize_workspace_actions(
        {"notification_display": {"DisplayText": "Hi", "DisplayURL": "http://x"}}
    )
    assert message == NotificationMessage(text="Hi", link="http://x")


def test_notification_empty_url_treated_as_absent() -> None:
    [message] = normalize_workspace_actions({"notification_display": {"DisplayText": "Hi", "DisplayURL": ""}})
    assert message == NotificationMessage(text="Hi", link=None)


def test_unknown_key_yields_none() -> None:
    assert normalize_workspace_actions({"unknown_key": {}}) == [None]


def test_classifier_reports_unrecognized_explicitly() -> None:
    assert classify_workspace_action("unknown_key", {}) == UnrecognizedAction(key="unknown_key")


def test_connect_agent_uses_clock_not_payload() -> None:
    clock = _fixed_clock(datetime(2018, 5, 1, 15, 4, 9))
    [message] = normalize_workspace_actions({"connect_agent": {"ignored": True}}, clock=clock)
    assert message == AgentMessage(content="3:04:09 PM")


def test_connect_agent_default_clock_format() -> None:
    [message] = normalize_workspace_actions({"connect_agent": {}})
    assert isinstance(message, AgentMessage)
    assert re.fullmatch(r"\d{1,2}:\d{2}:\d{2} (AM|PM)", message.content)


@pytest.mark.parametrize(
    ("moment", "expected"),
    [
        (datetime(2018, 1, 1, 0, 0, 0), "12:00:00 AM"),
        (datetime(2018, 1, 1, 9, 5, 7), "9:05:07 AM"),
        (datetime(2018, 1, 1, 12, 30, 0), "12:30:00 PM"),
        (datetime(2018, 1, 1, 23, 59, 59), "11:59:59 PM"),
    ],
)
def test_format_time_of_day(moment: datetime, expected: str) -> None:
    assert format_time_of_day(moment) == expected


def test_pass_through_payloads_are_unchanged() -> None:
    balance = {"balance": "1,234.00", "due": "2018-02-01"}
    appointment = {"date": "Tuesday", "time": "10am"}
    statement = {"transactions": [{"amount": 12.5}]}

    messages = normalize_workspace_actions(
        {"cc_displaystatement": balance, "appointment_display": appointment, "statement_display": statement}
    )

    assert messages == [
        BalanceMessage(content=balance),
        AppointmentMessage(content=appointment),
        StatementMessage(content=statement),
    ]
    assert messages[0].content is balance


def test_output_matches_bag_order_and_length() -> None:
    bag = {
        "statement_display": {},
        "mystery": {},
        "notification_display": {"DisplayText": "Done"},
        "connect_agent": {},
        "another_mystery": None,
    }
    clock = _fixed_clock(datetime(2018, 1, 1, 8, 0, 0))

    messages = normalize_workspace_actions(bag, clock=clock)

    assert len(messages) == len(bag)
    assert [type(m).__name__ if m else None for m in messages] == [
        "StatementMessage",
        None,
        "NotificationMessage",
        "AgentMessage",
        None,
    ]


def test_empty_bag() -> None:
    assert normalize_workspace_actions({}) == []


def test_recognized_keys() -> None:
    assert WORKSPACE_ACTION_KEYS == {
        "cc_displaystatement",
        "appointment_display",
        "connect_agent",
        "cc_selecteddisplay",
        "statement_display",
        "notification_display",
    }


def test_renderable_messages_drop_unrecognized() -> None:
    messages = normalize_workspace_actions({"x": {}, "notification_display": {"DisplayText": "ok"}})
    assert renderable_messages(messages) == [NotificationMessage(text="ok", link=None)]


def test_messages_to_dicts_matches_ui_shape() -> None:
    messages = normalize_workspace_actions(
        {
            "cc_selecteddisplay": {"CardCriteria": ["Saving"]},
            "notification_display": {"DisplayText": "Hi", "DisplayURL": "http://x"},
            "nope": {},
            "cc_displaystatement": {"balance": 10},
        }
    )

    assert messages_to_dicts(messages) == [
        {
            "type": "creditCard",
            "content": [
                {
                    "id": 1,
                    "value": "Saving",
                    "cardName": "The Mega Saver",
                    "description": "Save on interest to help pay down your balance faster",
                }
            ],
        },
        {"type": "notification", "text": "Hi", "link": "http://x"},
        None,
        {"type": "balance", "content": {"balance": 10}},
    ]


def test_single_string_criterion_selects_that_card() -> None:
    [message] = normalize_workspace_actions({"cc_selecteddisplay": {"CardCriteria": "Saving"}})
    assert isinstance(message, CreditCardMessage)
    assert [c.id for c in message.content] == [1]


@pytest.mark.parametrize("payload", [None, "Hi", ["Hi"]])
def test_notification_with_non_mapping_payload(payload: object) -> None:
    assert normalize_workspace_actions({"notification_display": payload}) == [
        NotificationMessage(text="", link=None)
    ]
