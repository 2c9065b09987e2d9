from .backend_client import BankingBackend, FakeBankingBackend
from .card_catalog import CARD_CATALOG, select_cards
from .client_actions import resolve_client_action
from .domain_types import (
    AgentMessage,
    AppointmentMessage,
    BalanceMessage,
    CardOffer,
    ClientActionName,
    ClientActionRequest,
    ConversationContext,
    CreditCardMessage,
    NormalizedMessage,
    NotificationMessage,
    ResolvedClientAction,
    StatementMessage,
    UnrecognizedAction,
    UserTurnPayload,
)
from .errors import BankChatError, ConfigurationError, TransportFailure
from .http_backend_client import HttpBackendClient
from .turn_composer import TurnComposer
from .workspace_actions import (
    classify_workspace_action,
    messages_to_dicts,
    normalize_workspace_actions,
    renderable_messages,
)

__all__ = [
    "AgentMessage",
    "AppointmentMessage",
    "BalanceMessage",
    "BankChatError",
    "BankingBackend",
    "CARD_CATALOG",
    "CardOffer",
    "ClientActionName",
    "ClientActionRequest",
    "ConfigurationError",
    "ConversationContext",
    "CreditCardMessage",
    "FakeBankingBackend",
    "HttpBackendClient",
    "NormalizedMessage",
    "NotificationMessage",
    "ResolvedClientAction",
    "StatementMessage",
    "TransportFailure",
    "TurnComposer",
    "UnrecognizedAction",
    "UserTurnPayload",
    "classify_workspace_action",
    "messages_to_dicts",
    "normalize_workspace_actions",
    "renderable_messages",
    "resolve_client_action",
    "select_cards",
]
