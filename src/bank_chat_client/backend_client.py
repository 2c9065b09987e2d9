from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from .client_actions import resolve_client_action
from .domain_types import ClientActionRequest, ConversationContext


class BankingBackend(Protocol):
    async def send_turn(self, text: str, context: ConversationContext) -> Any: ...

    async def execute_client_action(self, action: ClientActionRequest) -> Any | None: ...


@dataclass
class FakeBankingBackend:
    async def send_turn(self, text: str, context: ConversationContext) -> Any:
        return {"input": {"text": text}, "context": dict(context), "output": {"text": []}}

    async def execute_client_action(self, action: ClientActionRequest) -> Any | None:
        resolved = resolve_client_action(action)
        if resolved is None:
            return None
        return {"endpoint": resolved.endpoint, "value": resolved.value}
