from typing import Annotated, List, Optional, Union

from hiero_sdk_python import AccountId, Hbar, PublicKey
from hiero_sdk_python.account.account_update_transaction import AccountUpdateParams
from pydantic import Field

from .base import BaseModelWithArbitraryTypes


class TransferEntry(BaseModelWithArbitraryTypes):
    """One leg of a double-entry transfer list; negative amounts are debits."""

    account_id: AccountId
    amount: int


class HbarTransferRecipient(BaseModelWithArbitraryTypes):
    account_id: Annotated[
        str, Field(description="Recipient account ID or EVM address.")
    ]
    amount: Annotated[
        Union[float, int, str], Field(description="Amount of HBAR to transfer.")
    ]


class TransferHbarParameters(BaseModelWithArbitraryTypes):
    transfers: Annotated[
        List[HbarTransferRecipient],
        Field(min_length=1, description="Array of HBAR transfers."),
    ]
    source_account_id: Annotated[
        Optional[str], Field(description="Sender account ID.")
    ] = None
    transaction_memo: Annotated[
        Optional[str], Field(description="Memo to include with the transaction.")
    ] = None


class TransferHbarParametersNormalised(BaseModelWithArbitraryTypes):
    hbar_transfers: List[TransferEntry]
    transaction_memo: Optional[str] = None


class CreateAccountParameters(BaseModelWithArbitraryTypes):
    public_key: Annotated[
        Optional[str],
        Field(description="Account public key. Defaults to the operator key."),
    ] = None
    account_memo: Annotated[
        Optional[str], Field(description="Optional memo for the account.")
    ] = None
    initial_balance: Annotated[
        Union[float, int, str],
        Field(description="Initial HBAR balance to fund the account."),
    ] = 0
    max_automatic_token_associations: Annotated[
        int,
        Field(ge=-1, description="Max automatic token associations, -1 for unlimited."),
    ] = -1


class CreateAccountParametersNormalised(BaseModelWithArbitraryTypes):
    key: PublicKey
    initial_balance: Hbar
    memo: Optional[str] = None
    max_automatic_token_associations: int = -1


class UpdateAccountParameters(BaseModelWithArbitraryTypes):
    account_id: Annotated[
        Optional[str],
        Field(description="Account ID to update. Defaults to the operator account."),
    ] = None
    max_automatic_token_associations: Annotated[
        Optional[int],
        Field(ge=-1, description="Max automatic token associations, -1 for unlimited."),
    ] = None
    staked_account_id: Annotated[
        Optional[str], Field(description="Staked account ID.")
    ] = None
    account_memo: Annotated[Optional[str], Field(description="Account memo.")] = None
    decline_staking_reward: Annotated[
        Optional[bool], Field(description="Decline staking rewards.")
    ] = None


class UpdateAccountParametersNormalised(BaseModelWithArbitraryTypes):
    account_params: AccountUpdateParams


class DeleteAccountParameters(BaseModelWithArbitraryTypes):
    account_id: Annotated[str, Field(description="The account ID to delete.")]
    transfer_account_id: Annotated[
        Optional[str],
        Field(description="Account receiving the remaining balance. Defaults to the operator."),
    ] = None


class DeleteAccountParametersNormalised(BaseModelWithArbitraryTypes):
    account_id: AccountId
    transfer_account_id: AccountId


class AccountQueryParameters(BaseModelWithArbitraryTypes):
    account_id: Annotated[str, Field(description="The account ID to query.")]


class AccountBalanceQueryParameters(BaseModelWithArbitraryTypes):
    account_id: Annotated[
        Optional[str], Field(description="The account ID to query.")
    ] = None


class AccountBalanceQueryParametersNormalised(BaseModelWithArbitraryTypes):
    account_id: str


class AccountTokenBalancesQueryParameters(BaseModelWithArbitraryTypes):
    account_id: Annotated[
        Optional[str],
        Field(description="The account ID to query. Defaults to the operator account."),
    ] = None
    token_id: Annotated[
        Optional[str], Field(description="Only return the balance of this token.")
    ] = None


class AccountTokenBalancesQueryParametersNormalised(BaseModelWithArbitraryTypes):
    account_id: str
    token_id: Optional[str] = None
