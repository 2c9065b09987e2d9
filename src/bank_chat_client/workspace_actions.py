"""Normalization of workspace actions into UI chat messages.

The conversation backend attaches workspace actions as a mapping keyed by
action name. Each recognized key becomes one typed message; anything else
becomes ``None`` at the same position so the caller can keep positions aligned
with the source payload.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Iterable, Mapping

from .card_catalog import select_cards
from .domain_types import (
    AgentMessage,
    AppointmentMessage,
    BalanceMessage,
    CreditCardMessage,
    NormalizedMessage,
    NotificationMessage,
    StatementMessage,
    UnrecognizedAction,
)

__all__ = [
    "Clock",
    "WORKSPACE_ACTION_KEYS",
    "classify_workspace_action",
    "format_time_of_day",
    "messages_to_dicts",
    "normalize_workspace_actions",
    "renderable_messages",
]

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def format_time_of_day(moment: datetime) -> str:
    """Render a time the way en-US locales do, e.g. ``3:07:09 PM``."""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"


def _balance(payload: Any, clock: Clock) -> NormalizedMessage:
    return BalanceMessage(content=payload)


def _appointment(payload: Any, clock: Clock) -> NormalizedMessage:
    return AppointmentMessage(content=payload)


def _agent(payload: Any, clock: Clock) -> NormalizedMessage:
    # Payload is ignored: the message records when the hand-off was processed.
    return AgentMessage(content=format_time_of_day(clock()))


def _credit_cards(payload: Any, clock: Clock) -> NormalizedMessage:
    criteria = payload.get("CardCriteria") if isinstance(payload, Mapping) else None
    if isinstance(criteria, str):
        criteria = (criteria,)
    return CreditCardMessage(content=select_cards(criteria or ()))


def _statement(payload: Any, clock: Clock) -> NormalizedMessage:
    return StatementMessage(content=payload)


def _notification(payload: Any, clock: Clock) -> NormalizedMessage:
    if not isinstance(payload, Mapping):
        return NotificationMessage(text="", link=None)
    link = payload.get("DisplayURL")
    return NotificationMessage(text=payload.get("DisplayText", ""), link=link if link else None)


_BUILDERS: dict[str, Callable[[Any, Clock], NormalizedMessage]] = {
    "cc_displaystatement": _balance,
    "appointment_display": _appointment,
    "connect_agent": _agent,
    "cc_selecteddisplay": _credit_cards,
    "statement_display": _statement,
    "notification_display": _notification,
}

WORKSPACE_ACTION_KEYS = frozenset(_BUILDERS)


def classify_workspace_action(
    key: str,
    payload: Any,
    clock: Clock = datetime.now,
) -> NormalizedMessage | UnrecognizedAction:
    builder = _BUILDERS.get(key)
    if builder is None:
        return UnrecognizedAction(key=key)
    return builder(payload, clock)


def normalize_workspace_actions(
    actions: Mapping[str, Any],
    clock: Clock | None = None,
) -> list[NormalizedMessage | None]:
    """
    Convert a bag of workspace actions into chat messages.

    Args:
        actions: Action payloads keyed by action name, as sent by the backend
        clock: Source of the current local time, defaults to ``datetime.now``

    Returns:
        One entry per key in ``actions`` order; None for unrecognized keys.
    """
    now = clock or datetime.now
    messages: list[NormalizedMessage | None] = []
    for key, payload in actions.items():
        result = classify_workspace_action(key, payload, now)
        if isinstance(result, UnrecognizedAction):
            logger.debug("Ignoring unrecognized workspace action %r", result.key)
            messages.append(None)
        else:
            messages.append(result)
    return messages


def renderable_messages(messages: Iterable[NormalizedMessage | None]) -> list[NormalizedMessage]:
    return [m for m in messages if m is not None]


def messages_to_dicts(messages: Iterable[NormalizedMessage | None]) -> list[dict[str, Any] | None]:
    return [None if m is None else m.to_dict() for m in messages]
