import os

from dotenv import load_dotenv
from hiero_sdk_python import AccountId, Client, Network, PrivateKey

load_dotenv(".env")

OPERATOR_ENV_VARS = ("ACCOUNT_ID", "PRIVATE_KEY")
HEDERA_NETWORK = os.getenv("HEDERA_NETWORK", "testnet")


def has_operator_credentials() -> bool:
    return all(os.getenv(name) for name in OPERATOR_ENV_VARS)


def get_custom_client(account_id: AccountId, private_key: PrivateKey) -> Client:
    """Client for HEDERA_NETWORK acting as the given account."""
    client = Client(Network(network=HEDERA_NETWORK))
    client.set_operator(account_id, private_key)
    return client


def get_operator_client_for_tests() -> Client:
    if not has_operator_credentials():
        raise RuntimeError("ACCOUNT_ID and PRIVATE_KEY must be set to run network tests")

    return get_custom_client(
        AccountId.from_string(os.getenv("ACCOUNT_ID")),
        PrivateKey.from_string(os.getenv("PRIVATE_KEY")),
    )
