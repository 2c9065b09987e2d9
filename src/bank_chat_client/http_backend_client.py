from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from .backend_client import BankingBackend
from .client_actions import resolve_client_action
from .domain_types import ClientActionRequest, ConversationContext
from .errors import TransportFailure
from .turn_composer import TurnComposer

logger = logging.getLogger(__name__)

MESSAGE_PATH = "/api/message"
JSON_ACCEPT = {"Accept": "application/json"}


class HttpBackendClient(BankingBackend):
    """
    Banking backend reached over HTTP.

    Every path is joined onto ``base_url``, root-absolute ones included: with
    ``http://host/app`` the account lookup goes to
    ``http://host/app/bank/validate``.
    """

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.transport = transport
        self.composer = TurnComposer()

    async def send_turn(self, text: str, context: ConversationContext) -> Any:
        payload = self.composer.compose(text=text, context=context)
        headers = {**JSON_ACCEPT, "Content-Type": "application/json"}
        return await self._request_json("POST", MESSAGE_PATH, headers=headers, json=payload.to_json())

    async def execute_client_action(self, action: ClientActionRequest) -> Any | None:
        resolved = resolve_client_action(action)
        if resolved is None:
            return None
        return await self._request_json("GET", resolved.endpoint, headers=JSON_ACCEPT, params=resolved.query)

    async def _request_json(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str],
        json: Any = None,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        # No timeout and no retry: a single failure ends the call.
        async with httpx.AsyncClient(base_url=self.base_url, timeout=None, transport=self.transport) as client:
            request = client.build_request(method, path, headers=headers, json=json, params=params)
            url = str(request.url)
            try:
                resp = await client.send(request)
            except httpx.HTTPError as exc:
                raise TransportFailure(f"{method} {url} failed: {exc}", url=url) from exc

            logger.debug("%s %s -> %s", method, url, resp.status_code)
            # Error statuses are forwarded like any other JSON body.
            if resp.is_error:
                logger.warning("%s %s returned HTTP %s", method, url, resp.status_code)

            try:
                return resp.json()
            except ValueError as exc:
                raise TransportFailure(f"{method} {url} returned a non-JSON body", url=url) from exc
