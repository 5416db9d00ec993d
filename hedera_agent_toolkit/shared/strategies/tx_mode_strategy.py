from __future__ import annotations

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from hiero_sdk_python import (
    AccountId,
    Client,
    PrecheckError,
    ReceiptStatusError,
    ResponseCode,
    TransactionId,
)
from hiero_sdk_python.exceptions import MaxAttemptsError
from hiero_sdk_python.transaction.transaction import Transaction

from hedera_agent_toolkit.shared.configuration import AgentMode, Context
from hedera_agent_toolkit.shared.errors import (
    MissingAccountContextError,
    NetworkError,
)
from hedera_agent_toolkit.shared.models import (
    ExecutedTransactionToolResponse,
    RawTransactionResponse,
    ReturnBytesToolResponse,
    ToolResponse,
)

logger = logging.getLogger(__name__)

PostProcess = Callable[[RawTransactionResponse], str]

# nodes pinned on frozen transactions handed back to the caller
RETURN_BYTES_NODE_ACCOUNT_IDS: List[str] = ["0.0.4", "0.0.5"]


def _default_post_process(response: RawTransactionResponse) -> str:
    return json.dumps(response.to_dict(), indent=2)


def _status_name(status: Any) -> str:
    if isinstance(status, ResponseCode):
        return status.name
    try:
        return ResponseCode(status).name
    except ValueError:
        return str(status)


class TxModeStrategy(ABC):
    """Decides what happens to a built transaction."""

    @abstractmethod
    async def handle(
        self,
        tx: Transaction,
        client: Client,
        context: Context,
        post_process: Optional[PostProcess] = None,
    ) -> ToolResponse:
        raise NotImplementedError


class ExecuteStrategy(TxModeStrategy):
    """Signs with the client operator, submits and waits for the receipt.

    The SDK call is blocking, so it runs in a worker thread. A failed precheck,
    a non-success receipt or exhausted node attempts are re-raised as
    ``NetworkError``; nothing is retried here.
    """

    async def handle(
        self,
        tx: Transaction,
        client: Client,
        context: Context,
        post_process: Optional[PostProcess] = None,
    ) -> ExecutedTransactionToolResponse:
        post_process = post_process or _default_post_process

        try:
            receipt = await asyncio.to_thread(
                tx.execute, client, validate_status=True
            )
        except (PrecheckError, ReceiptStatusError, MaxAttemptsError) as e:
            logger.warning("Transaction %s failed: %s", type(tx).__name__, e)
            raise NetworkError(str(e)) from e

        raw = RawTransactionResponse(
            status=_status_name(receipt.status),
            transaction_id=(
                str(receipt.transaction_id) if receipt.transaction_id else None
            ),
            account_id=receipt.account_id,
            token_id=receipt.token_id,
            topic_id=receipt.topic_id,
            contract_id=receipt.contract_id,
        )
        logger.debug("Transaction %s executed: %s", raw.transaction_id, raw.status)

        return ExecutedTransactionToolResponse(
            human_message=post_process(raw),
            raw=raw,
        )


class ReturnBytesStrategy(TxModeStrategy):
    """Freezes the transaction for ``context.account_id`` and returns its bytes.

    The transaction is not signed and the network is never contacted; the holder
    of the account key signs and submits it.
    """

    async def handle(
        self,
        tx: Transaction,
        client: Client,
        context: Context,
        post_process: Optional[PostProcess] = None,
    ) -> ReturnBytesToolResponse:
        if not context.account_id:
            raise MissingAccountContextError(
                "Context account ID is required for return bytes mode"
            )

        payer = AccountId.from_string(context.account_id)
        tx.set_transaction_id(TransactionId.generate(payer))
        tx.set_node_account_ids(
            [AccountId.from_string(node) for node in RETURN_BYTES_NODE_ACCOUNT_IDS]
        )
        tx.freeze()

        return ReturnBytesToolResponse(
            human_message="Transaction bytes are ready to be signed and submitted.",
            bytes_data=tx.to_bytes(),
        )


def get_strategy_from_context(context: Context) -> TxModeStrategy:
    if context.mode == AgentMode.RETURN_BYTES:
        return ReturnBytesStrategy()
    return ExecuteStrategy()


async def handle_transaction(
    tx: Transaction,
    client: Client,
    context: Context,
    post_process: Optional[PostProcess] = None,
) -> ToolResponse:
    """Run ``tx`` through the strategy selected by ``context.mode``.

    Args:
        tx: Unsigned transaction produced by ``HederaBuilder``.
        client: Hedera client; used for submission in autonomous mode only.
        context: Runtime context selecting the mode and the payer account.
        post_process: Turns the receipt fields into the human-readable message.

    Returns:
        ExecutedTransactionToolResponse or ReturnBytesToolResponse.

    Raises:
        MissingAccountContextError: Return-bytes mode without ``context.account_id``.
        NetworkError: The network rejected or failed the transaction.
    """
    strategy = get_strategy_from_context(context)
    return await strategy.handle(tx, client, context, post_process)
