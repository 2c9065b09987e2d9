from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Mapping, Sequence, Union

ConversationContext = Mapping[str, Any]


@dataclass(frozen=True)
class UserTurnPayload:
    text: str
    context: ConversationContext

    def to_json(self) -> dict[str, Any]:
        return {"input": {"text": self.text}, "context": self.context}


class ClientActionName(str, Enum):
    VALIDATE_ACC = "ValidateAcc"
    RETRIEVE_ZIP = "RetrieveZip"
    SHOW_STATEMENT = "ShowStatement"


@dataclass(frozen=True)
class ClientActionRequest:
    # Kept as a raw string: backends may declare names this client does not know.
    name: str
    parameters: Mapping[str, Any]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClientActionRequest:
        return cls(name=str(data.get("name", "")), parameters=dict(data.get("parameters") or {}))


@dataclass(frozen=True)
class ResolvedClientAction:
    name: ClientActionName
    endpoint: str
    value: str

    @property
    def path(self) -> str:
        return f"{self.endpoint}?value={self.value}"

    @property
    def query(self) -> dict[str, str]:
        return {"value": self.value}


@dataclass(frozen=True)
class CardOffer:
    id: int
    value: str
    card_name: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "value": self.value,
            "cardName": self.card_name,
            "description": self.description,
        }


@dataclass(frozen=True)
class BalanceMessage:
    type: ClassVar[str] = "balance"
    content: Any

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "content": self.content}


@dataclass(frozen=True)
class AppointmentMessage:
    type: ClassVar[str] = "appointment"
    content: Any

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "content": self.content}


@dataclass(frozen=True)
class AgentMessage:
    """Agent hand-off; ``content`` is the local time the action was normalized."""

    type: ClassVar[str] = "agent"
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "content": self.content}


@dataclass(frozen=True)
class CreditCardMessage:
    type: ClassVar[str] = "creditCard"
    content: Sequence[CardOffer]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "content": [card.to_dict() for card in self.content]}


@dataclass(frozen=True)
class StatementMessage:
    type: ClassVar[str] = "statement"
    content: Any

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "content": self.content}


@dataclass(frozen=True)
class NotificationMessage:
    type: ClassVar[str] = "notification"
    text: str
    link: str | None

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "text": self.text, "link": self.link}


@dataclass(frozen=True)
class UnrecognizedAction:
    key: str


NormalizedMessage = Union[
    BalanceMessage,
    AppointmentMessage,
    AgentMessage,
    CreditCardMessage,
    StatementMessage,
    NotificationMessage,
]
