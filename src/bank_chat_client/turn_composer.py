from __future__ import annotations

from dataclasses import dataclass

from .domain_types import ConversationContext, UserTurnPayload


@dataclass(frozen=True)
class TurnComposer:
    def compose(self, *, text: str, context: ConversationContext | None = None) -> UserTurnPayload:
        # Context is opaque here; forwarded as-is, an absent one is sent as an empty object.
        return UserTurnPayload(text=text, context=context if context is not None else {})
