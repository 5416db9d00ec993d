"""Response shapes of the Hedera mirror node REST API, as consumed by the toolkit."""

from typing import Any, Dict, List, Optional, TypedDict

from hedera_agent_toolkit.shared.utils import LedgerId

LEDGER_ID_TO_BASE_URL: Dict[LedgerId, str] = {
    LedgerId.MAINNET: "https://mainnet-public.mirrornode.hedera.com/api/v1",
    LedgerId.TESTNET: "https://testnet.mirrornode.hedera.com/api/v1",
    LedgerId.PREVIEWNET: "https://previewnet.mirrornode.hedera.com/api/v1",
    LedgerId.LOCAL_NODE: "http://localhost:5551/api/v1",
}


class TokenBalance(TypedDict, total=False):
    automatic_association: bool
    created_timestamp: str
    token_id: str
    freeze_status: str
    kyc_status: str
    balance: int
    decimals: int


class TokenBalancesResponse(TypedDict):
    tokens: List[TokenBalance]


class AccountBalanceResponse(TypedDict, total=False):
    balance: int
    timestamp: str
    tokens: List[Dict[str, Any]]


class AccountResponse(TypedDict):
    account_id: str
    account_public_key: Optional[str]
    balance: AccountBalanceResponse
    evm_address: Optional[str]


class TopicMessagesQueryParams(TypedDict, total=False):
    topic_id: str
    lower_timestamp: Optional[str]
    upper_timestamp: Optional[str]
    limit: int


class TopicMessage(TypedDict, total=False):
    topic_id: str
    message: str
    consensus_timestamp: str
    sequence_number: int


class TopicMessagesResponse(TypedDict):
    topic_id: str
    messages: List[TopicMessage]


class KeyInfo(TypedDict):
    _type: str
    key: str


class TokenInfo(TypedDict, total=False):
    token_id: Optional[str]
    name: str
    symbol: str
    type: str
    memo: str
    decimals: str
    initial_supply: str
    total_supply: str
    max_supply: str
    supply_type: str
    treasury_account_id: str
    auto_renew_account: str
    auto_renew_period: int
    deleted: bool
    freeze_default: bool
    pause_status: str
    created_timestamp: str
    modified_timestamp: str
    expiry_timestamp: int
    admin_key: Optional[KeyInfo]
    supply_key: Optional[KeyInfo]
    kyc_key: Optional[KeyInfo]
    freeze_key: Optional[KeyInfo]
    wipe_key: Optional[KeyInfo]
    pause_key: Optional[KeyInfo]
    fee_schedule_key: Optional[KeyInfo]
    metadata_key: Optional[KeyInfo]
    metadata: str


class TransferData(TypedDict, total=False):
    account: str
    amount: int
    is_approval: bool


class TransactionData(TypedDict, total=False):
    transaction_id: str
    consensus_timestamp: str
    transaction_hash: str
    charged_tx_fee: int
    name: str
    result: str
    entity_id: Optional[str]
    memo_base64: str
    transfers: List[TransferData]
    token_transfers: List[Dict[str, Any]]


class TransactionDetailsResponse(TypedDict):
    transactions: List[TransactionData]
