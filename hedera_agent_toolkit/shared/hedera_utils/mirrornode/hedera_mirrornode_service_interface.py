from abc import ABC, abstractmethod
from typing import Optional

from .types import (
    AccountResponse,
    TokenBalancesResponse,
    TokenInfo,
    TopicMessagesQueryParams,
    TopicMessagesResponse,
    TransactionDetailsResponse,
)


class IHederaMirrornodeService(ABC):
    """Read-only access to ledger state through a mirror node."""

    @abstractmethod
    async def get_account(self, account_id: str) -> AccountResponse:
        """Fetch an account by native id or EVM address."""

    @abstractmethod
    async def get_account_hbar_balance(self, account_id: str) -> int:
        """Return the account balance in tinybars."""

    @abstractmethod
    async def get_account_token_balances(
        self, account_id: str, token_id: Optional[str] = None
    ) -> TokenBalancesResponse:
        """Return the token relationships (and balances) of an account."""

    @abstractmethod
    async def get_topic_messages(
        self, query_params: TopicMessagesQueryParams
    ) -> TopicMessagesResponse:
        """Return the messages of a topic within an optional time window."""

    @abstractmethod
    async def get_token_info(self, token_id: str) -> TokenInfo:
        """Return token details (decimals, supply, keys, treasury)."""

    @abstractmethod
    async def get_transaction_details(
        self, transaction_id: str, nonce: Optional[int] = None
    ) -> TransactionDetailsResponse:
        """Return the transactions recorded under a mirror-node style id."""
