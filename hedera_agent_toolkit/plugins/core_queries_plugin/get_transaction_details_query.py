"""Transaction details query tool backed by the mirror node."""

from __future__ import annotations

from hiero_sdk_python import Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.hedera_utils.decimals_utils import (
    HBAR_DECIMALS,
    to_display_unit,
)
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.hedera_utils.mirrornode import get_mirrornode_service
from hedera_agent_toolkit.shared.hedera_utils.mirrornode.types import (
    TransactionDetailsResponse,
)
from hedera_agent_toolkit.shared.models import ToolResponse
from hedera_agent_toolkit.shared.parameter_schemas import (
    TransactionDetailsQueryParameters,
)
from hedera_agent_toolkit.shared.tool import Tool
from hedera_agent_toolkit.shared.utils import ledger_id_from_network
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    untyped_query_output_parser,
)
from hedera_agent_toolkit.shared.utils.prompt_generator import PromptGenerator

TRANSACTION_SEPARATOR = "\n\n" + "=" * 50 + "\n\n"


def get_transaction_details_query_prompt(context: Context) -> str:
    context_snippet: str = PromptGenerator.get_context_snippet(context)
    usage_instructions: str = PromptGenerator.get_parameter_usage_instructions()

    return f"""
{context_snippet}

This tool will return the transaction details for a given Hedera transaction ID.

Parameters:
- transaction_id (str, required): The transaction ID to fetch details for, in "shard.realm.num-sss-nnn" format where sss are seconds and nnn are nanoseconds
- nonce (int, optional): Optional nonce value for the transaction
{usage_instructions}

Additional information:
Transaction IDs in format 0.0.4177806@1755169980.651721264 are accepted as well and converted to 0.0.4177806-1755169980-651721264.
"""


def post_process(
    transaction_details: TransactionDetailsResponse, transaction_id: str
) -> str:
    transactions = transaction_details.get("transactions") or []
    if not transactions:
        return f"No transaction details found for transaction ID: {transaction_id}"

    results = []
    for index, tx in enumerate(transactions):
        transfers_info = ""
        if tx.get("transfers"):
            transfers_info = "\nTransfers:\n" + "\n".join(
                f"  Account: {transfer['account']}, "
                f"Amount: {format(to_display_unit(transfer['amount'], HBAR_DECIMALS), 'f')}ℏ"
                for transfer in tx["transfers"]
            )

        header = (
            f"Transaction {index + 1} Details for {transaction_id}"
            if len(transactions) > 1
            else f"Transaction Details for {transaction_id}"
        )

        results.append(
            f"""{header}
Status: {tx.get("result")}
Consensus Timestamp: {tx.get("consensus_timestamp")}
Transaction Hash: {tx.get("transaction_hash")}
Transaction Fee: {tx.get("charged_tx_fee")}
Type: {tx.get("name")}
Entity ID: {tx.get("entity_id")}{transfers_info}"""
        )

    return TRANSACTION_SEPARATOR.join(results)


async def get_transaction_details_query(
    client: Client,
    context: Context,
    params: TransactionDetailsQueryParameters,
) -> ToolResponse:
    try:
        normalised_params = (
            HederaParameterNormaliser.normalise_get_transaction_details_params(params)
        )

        mirrornode_service = get_mirrornode_service(
            context.mirrornode_service, ledger_id_from_network(client.network)
        )
        transaction_details = await mirrornode_service.get_transaction_details(
            normalised_params.transaction_id, normalised_params.nonce
        )

        return ToolResponse(
            human_message=post_process(
                transaction_details, normalised_params.transaction_id
            ),
            extra={
                "transactionId": normalised_params.transaction_id,
                "transactionDetails": transaction_details,
            },
        )

    except Exception as e:
        message = f"Failed to get transaction details: {str(e)}"
        print("[get_transaction_details_query_tool]", message)
        return ToolResponse(human_message=message, error=message)


GET_TRANSACTION_DETAILS_QUERY_TOOL: str = "get_transaction_details_query_tool"


class GetTransactionDetailsQueryTool(Tool):
    def __init__(self, context: Context):
        self.method: str = GET_TRANSACTION_DETAILS_QUERY_TOOL
        self.name: str = "Get Transaction Details"
        self.description: str = get_transaction_details_query_prompt(context)
        self.parameters: type[TransactionDetailsQueryParameters] = (
            TransactionDetailsQueryParameters
        )
        self.output_parser = untyped_query_output_parser

    async def execute(
        self,
        client: Client,
        context: Context,
        params: TransactionDetailsQueryParameters,
    ) -> ToolResponse:
        return await get_transaction_details_query(client, context, params)
