from .base import BaseModelWithArbitraryTypes
from .account_schema import (
    TransferEntry,
    HbarTransferRecipient,
    TransferHbarParameters,
    TransferHbarParametersNormalised,
    CreateAccountParameters,
    CreateAccountParametersNormalised,
    UpdateAccountParameters,
    UpdateAccountParametersNormalised,
    DeleteAccountParameters,
    DeleteAccountParametersNormalised,
    AccountQueryParameters,
    AccountBalanceQueryParameters,
    AccountBalanceQueryParametersNormalised,
    AccountTokenBalancesQueryParameters,
    AccountTokenBalancesQueryParametersNormalised,
)
from .token_schema import (
    CreateFungibleTokenParameters,
    CreateFungibleTokenParametersNormalised,
    CreateNonFungibleTokenParameters,
    CreateNonFungibleTokenParametersNormalised,
    AirdropRecipient,
    AirdropFungibleTokenParameters,
    AirdropFungibleTokenParametersNormalised,
    MintFungibleTokenParameters,
    MintFungibleTokenParametersNormalised,
    MintNonFungibleTokenParameters,
    MintNonFungibleTokenParametersNormalised,
    GetTokenInfoParameters,
)
from .consensus_schema import (
    CreateTopicParameters,
    CreateTopicParametersNormalised,
    SubmitTopicMessageParameters,
    SubmitTopicMessageParametersNormalised,
    TopicMessagesQueryParameters,
    TopicMessagesQueryParametersNormalised,
)
from .evm_schema import (
    ContractExecuteTransactionParametersNormalised,
    CreateERC20Parameters,
    TransferERC20Parameters,
    CreateERC721Parameters,
    TransferERC721Parameters,
    MintERC721Parameters,
)
from .transaction_schema import (
    TransactionDetailsQueryParameters,
    TransactionDetailsQueryParametersNormalised,
)

__all__ = [
    "BaseModelWithArbitraryTypes",
    "TransferEntry",
    "HbarTransferRecipient",
    "TransferHbarParameters",
    "TransferHbarParametersNormalised",
    "CreateAccountParameters",
    "CreateAccountParametersNormalised",
    "UpdateAccountParameters",
    "UpdateAccountParametersNormalised",
    "DeleteAccountParameters",
    "DeleteAccountParametersNormalised",
    "AccountQueryParameters",
    "AccountBalanceQueryParameters",
    "AccountBalanceQueryParametersNormalised",
    "AccountTokenBalancesQueryParameters",
    "AccountTokenBalancesQueryParametersNormalised",
    "CreateFungibleTokenParameters",
    "CreateFungibleTokenParametersNormalised",
    "CreateNonFungibleTokenParameters",
    "CreateNonFungibleTokenParametersNormalised",
    "AirdropRecipient",
    "AirdropFungibleTokenParameters",
    "AirdropFungibleTokenParametersNormalised",
    "MintFungibleTokenParameters",
    "MintFungibleTokenParametersNormalised",
    "MintNonFungibleTokenParameters",
    "MintNonFungibleTokenParametersNormalised",
    "GetTokenInfoParameters",
    "CreateTopicParameters",
    "CreateTopicParametersNormalised",
    "SubmitTopicMessageParameters",
    "SubmitTopicMessageParametersNormalised",
    "TopicMessagesQueryParameters",
    "TopicMessagesQueryParametersNormalised",
    "ContractExecuteTransactionParametersNormalised",
    "CreateERC20Parameters",
    "TransferERC20Parameters",
    "CreateERC721Parameters",
    "TransferERC721Parameters",
    "MintERC721Parameters",
    "TransactionDetailsQueryParameters",
    "TransactionDetailsQueryParametersNormalised",
]
