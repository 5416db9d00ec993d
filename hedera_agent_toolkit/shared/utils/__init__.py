from enum import Enum
from typing import Any


class LedgerId(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"
    PREVIEWNET = "previewnet"
    LOCAL_NODE = "local-node"


_NETWORK_NAME_TO_LEDGER_ID = {
    "mainnet": LedgerId.MAINNET,
    "testnet": LedgerId.TESTNET,
    "previewnet": LedgerId.PREVIEWNET,
    "solo": LedgerId.LOCAL_NODE,
    "localhost": LedgerId.LOCAL_NODE,
    "local": LedgerId.LOCAL_NODE,
}


def ledger_id_from_network(network: Any) -> LedgerId:
    """Map a ``hiero_sdk_python.Network`` (or its name) to a LedgerId.

    Raises:
        ValueError: If the network name is unknown.
    """
    name = network if isinstance(network, str) else getattr(network, "network", None)
    ledger_id = _NETWORK_NAME_TO_LEDGER_ID.get(str(name).lower())
    if ledger_id is None:
        raise ValueError(f"Unsupported network: {name}")
    return ledger_id


__all__ = ["LedgerId", "ledger_id_from_network"]
