import asyncio

from hiero_sdk_python import Client, TransactionId, TransactionRecordQuery

from hedera_agent_toolkit.shared.errors import NetworkError


async def get_deployed_token_address(client: Client, transaction_id: str) -> str:
    """Return the address a factory ``deployToken`` call returned, as ``0x`` hex.

    Raises:
        NetworkError: If the record carries no contract call result.
    """
    query = TransactionRecordQuery(
        transaction_id=TransactionId.from_string(transaction_id)
    )
    record = await asyncio.to_thread(query.execute, client)
    if record.call_result is None:
        raise NetworkError(f"No contract call result for transaction {transaction_id}")
    return "0x" + record.call_result.get_address(0)
