"""Resolution of backend-declared client actions to banking lookup requests."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable

from .domain_types import ClientActionName, ClientActionRequest, ResolvedClientAction

__all__ = ["CLIENT_ACTION_ROUTES", "ClientActionRoute", "resolve_client_action"]

logger = logging.getLogger(__name__)


def _plain(raw: Any) -> str:
    # Scalars render as the JSON they arrived as: true, not True; 1, not 1.0.
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return str(int(raw))
    return json.dumps(raw)


def _quoted(raw: Any) -> str:
    # The statement service expects the date as a quoted literal.
    return f'"{_plain(raw)}"'


@dataclass(frozen=True)
class ClientActionRoute:
    endpoint: str
    parameter: str
    render: Callable[[Any], str] = _plain


# Endpoints are kept exactly as the banking backend routes them, leading slash included or not.
CLIENT_ACTION_ROUTES: dict[ClientActionName, ClientActionRoute] = {
    ClientActionName.VALIDATE_ACC: ClientActionRoute(endpoint="/bank/validate", parameter="chosen_acc"),
    ClientActionName.RETRIEVE_ZIP: ClientActionRoute(endpoint="bank/locate", parameter="zip_value"),
    ClientActionName.SHOW_STATEMENT: ClientActionRoute(
        endpoint="bank/statement", parameter="statement_date", render=_quoted
    ),
}


def resolve_client_action(action: ClientActionRequest) -> ResolvedClientAction | None:
    """
    Map a client action onto the lookup endpoint and query value it needs.

    Args:
        action: Action declared by the conversation backend

    Returns:
        The resolved lookup, or None when the action name is not one this
        client knows how to execute.
    """
    try:
        name = ClientActionName(action.name)
    except ValueError:
        logger.debug("No client action route for %r", action.name)
        return None

    route = CLIENT_ACTION_ROUTES[name]
    raw = action.parameters.get(route.parameter)
    if raw is None:
        # Sent anyway with an empty value; the backend decides how to answer.
        logger.warning("Client action %s is missing parameter %r", name.value, route.parameter)

    return ResolvedClientAction(name=name, endpoint=route.endpoint, value=route.render(raw))
