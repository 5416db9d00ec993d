from typing import Annotated

from hiero_sdk_python import ContractId
from pydantic import Field

from .base import BaseModelWithArbitraryTypes


class ContractExecuteTransactionParametersNormalised(BaseModelWithArbitraryTypes):
    contract_id: ContractId
    function_parameters: bytes
    gas: int


class CreateERC20Parameters(BaseModelWithArbitraryTypes):
    token_name: Annotated[str, Field(description="The name of the token.")]
    token_symbol: Annotated[str, Field(description="The symbol of the token.")]
    decimals: Annotated[
        int,
        Field(ge=0, le=18, description="The number of decimals the token supports."),
    ] = 18
    initial_supply: Annotated[
        int, Field(ge=0, description="The initial supply of the token.")
    ] = 0


class TransferERC20Parameters(BaseModelWithArbitraryTypes):
    contract_id: Annotated[
        str, Field(description="The id of the ERC20 contract (Hedera id or EVM address).")
    ]
    recipient_address: Annotated[
        str, Field(description="Address to which the tokens will be transferred.")
    ]
    amount: Annotated[
        int, Field(ge=0, description="The amount of tokens to transfer in base units.")
    ]


class CreateERC721Parameters(BaseModelWithArbitraryTypes):
    token_name: Annotated[str, Field(description="The name of the token.")]
    token_symbol: Annotated[str, Field(description="The symbol of the token.")]
    base_uri: Annotated[
        str, Field(description="The base URI for token metadata.")
    ] = ""


class TransferERC721Parameters(BaseModelWithArbitraryTypes):
    contract_id: Annotated[str, Field(description="The id of the ERC721 contract.")]
    from_address: Annotated[
        str, Field(description="Address from which the token will be transferred.")
    ]
    to_address: Annotated[
        str, Field(description="Address to which the token will be transferred.")
    ]
    token_id: Annotated[
        int, Field(ge=0, description="The ID of the token to transfer.")
    ]


class MintERC721Parameters(BaseModelWithArbitraryTypes):
    contract_id: Annotated[str, Field(description="The id of the ERC721 contract.")]
    to_address: Annotated[
        str, Field(description="Address to which the token will be minted.")
    ]
