from __future__ import annotations

import json
from typing import Any, Iterable

from .domain_types import (
    AgentMessage,
    CreditCardMessage,
    NormalizedMessage,
    NotificationMessage,
)


def _compact(content: Any) -> str:
    return json.dumps(content, sort_keys=True, default=str)


def render_message(message: NormalizedMessage | None) -> str:
    if message is None:
        return "[unrecognized action]"
    if isinstance(message, NotificationMessage):
        link = f" <{message.link}>" if message.link else ""
        return f"[notification] {message.text}{link}"
    if isinstance(message, AgentMessage):
        return f"[agent] connecting you to an agent ({message.content})"
    if isinstance(message, CreditCardMessage):
        if not message.content:
            return "[creditCard] no matching offers"
        lines = ["[creditCard]"]
        for card in message.content:
            lines.append(f"  - {card.card_name}: {card.description}")
        return "\n".join(lines)
    return f"[{message.type}] {_compact(message.content)}"


def render_messages(messages: Iterable[NormalizedMessage | None]) -> str:
    return "\n".join(render_message(m) for m in messages)


def render_json(data: Any) -> str:
    return json.dumps(data, indent=2, sort_keys=True, default=str)
