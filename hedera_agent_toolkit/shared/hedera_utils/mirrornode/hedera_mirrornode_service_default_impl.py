from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit

import httpx

from hedera_agent_toolkit.shared.errors import NetworkError
from hedera_agent_toolkit.shared.utils import LedgerId

from .hedera_mirrornode_service_interface import IHederaMirrornodeService
from .types import (
    LEDGER_ID_TO_BASE_URL,
    AccountResponse,
    TokenBalancesResponse,
    TokenInfo,
    TopicMessage,
    TopicMessagesQueryParams,
    TopicMessagesResponse,
    TransactionDetailsResponse,
)

logger = logging.getLogger(__name__)

DEFAULT_TOPIC_MESSAGES_LIMIT = 100


class HederaMirrornodeServiceDefaultImpl(IHederaMirrornodeService):
    """Mirror node REST client backed by ``httpx.AsyncClient``.

    A fresh client is opened per request so the service can be shared by
    concurrent tool calls without lifecycle management.
    """

    def __init__(self, ledger_id: LedgerId, timeout: float = 10.0):
        base_url = LEDGER_ID_TO_BASE_URL.get(ledger_id)
        if base_url is None:
            raise ValueError(f"Network type {ledger_id} not supported for mirror node")
        self.ledger_id = ledger_id
        self.base_url = base_url
        self.timeout = timeout

    async def _get(self, url: str, params: Any = None) -> Dict[str, Any]:
        logger.debug("GET %s params=%s", url, params)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"Mirror node request {url} failed: HTTP {e.response.status_code} "
                f"{e.response.reason_phrase}"
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Mirror node request {url} failed: {e}") from e
        except ValueError as e:
            raise NetworkError(f"Mirror node returned invalid JSON for {url}") from e

    def _next_url(self, next_link: str) -> str:
        # links.next is a path such as /api/v1/topics/0.0.1/messages?limit=25&...
        parts = urlsplit(self.base_url)
        return f"{parts.scheme}://{parts.netloc}{next_link}"

    async def get_account(self, account_id: str) -> AccountResponse:
        data = await self._get(f"{self.base_url}/accounts/{account_id}")
        key = data.get("key") or {}
        return AccountResponse(
            account_id=data["account"],
            account_public_key=key.get("key"),
            balance=data.get("balance") or {},
            evm_address=data.get("evm_address"),
        )

    async def get_account_hbar_balance(self, account_id: str) -> int:
        account = await self.get_account(account_id)
        return int(account["balance"].get("balance", 0))

    async def get_account_token_balances(
        self, account_id: str, token_id: Optional[str] = None
    ) -> TokenBalancesResponse:
        params = {"token.id": token_id} if token_id else None
        data = await self._get(f"{self.base_url}/accounts/{account_id}/tokens", params)
        return TokenBalancesResponse(tokens=data.get("tokens", []))

    async def get_topic_messages(
        self, query_params: TopicMessagesQueryParams
    ) -> TopicMessagesResponse:
        topic_id = query_params["topic_id"]
        limit = query_params.get("limit") or DEFAULT_TOPIC_MESSAGES_LIMIT

        params: List[tuple] = [("limit", min(limit, 100)), ("order", "desc")]
        if query_params.get("lower_timestamp"):
            params.append(("timestamp", f"gte:{query_params['lower_timestamp']}"))
        if query_params.get("upper_timestamp"):
            params.append(("timestamp", f"lte:{query_params['upper_timestamp']}"))

        messages: List[TopicMessage] = []
        url: Optional[str] = f"{self.base_url}/topics/{topic_id}/messages"
        request_params: Any = params
        while url and len(messages) < limit:
            data = await self._get(url, request_params)
            messages.extend(data.get("messages", []))
            next_link = (data.get("links") or {}).get("next")
            url = self._next_url(next_link) if next_link else None
            # the next link already carries the query string
            request_params = None

        return TopicMessagesResponse(topic_id=topic_id, messages=messages[:limit])

    async def get_token_info(self, token_id: str) -> TokenInfo:
        data = await self._get(f"{self.base_url}/tokens/{token_id}")
        return TokenInfo(**data)

    async def get_transaction_details(
        self, transaction_id: str, nonce: Optional[int] = None
    ) -> TransactionDetailsResponse:
        params = {"nonce": nonce} if nonce is not None else None
        data = await self._get(f"{self.base_url}/transactions/{transaction_id}", params)
        return TransactionDetailsResponse(transactions=data.get("transactions", []))
