from typing import Annotated, List, Literal, Optional, Union

from hiero_sdk_python import TokenId
from hiero_sdk_python.tokens.token_create_transaction import TokenKeys, TokenParams
from pydantic import Field

from .account_schema import TransferEntry
from .base import BaseModelWithArbitraryTypes


class CreateFungibleTokenParameters(BaseModelWithArbitraryTypes):
    token_name: Annotated[str, Field(description="The name of the token.")]
    token_symbol: Annotated[str, Field(description="The symbol of the token.")]
    initial_supply: Annotated[
        Union[int, float],
        Field(description="The initial supply of the token in display units."),
    ] = 0
    supply_type: Annotated[
        Literal["finite", "infinite"],
        Field(description="Supply type of the token."),
    ] = "infinite"
    max_supply: Annotated[
        Optional[Union[int, float]],
        Field(description="The maximum supply of the token in display units."),
    ] = None
    decimals: Annotated[
        int, Field(ge=0, le=18, description="The number of decimals.")
    ] = 0
    treasury_account_id: Annotated[
        Optional[str], Field(description="The treasury account of the token.")
    ] = None
    is_supply_key: Annotated[
        Optional[bool],
        Field(description="Determines if the token supply key should be set."),
    ] = None


class CreateFungibleTokenParametersNormalised(BaseModelWithArbitraryTypes):
    token_params: TokenParams
    keys: Optional[TokenKeys] = None


class CreateNonFungibleTokenParameters(BaseModelWithArbitraryTypes):
    token_name: Annotated[str, Field(description="The name of the token.")]
    token_symbol: Annotated[str, Field(description="The symbol of the token.")]
    max_supply: Annotated[
        int, Field(gt=0, description="Maximum supply of NFTs.")
    ] = 100
    treasury_account_id: Annotated[
        Optional[str], Field(description="Treasury account ID.")
    ] = None


class CreateNonFungibleTokenParametersNormalised(BaseModelWithArbitraryTypes):
    token_params: TokenParams
    keys: TokenKeys


class AirdropRecipient(BaseModelWithArbitraryTypes):
    account_id: Annotated[
        str, Field(description='Recipient account ID (e.g., "0.0.xxxx").')
    ]
    amount: Annotated[
        Union[int, float, str], Field(description="Amount in display units.")
    ]


class AirdropFungibleTokenParameters(BaseModelWithArbitraryTypes):
    token_id: Annotated[str, Field(description="The id of the token.")]
    source_account_id: Annotated[
        Optional[str], Field(description="The account to airdrop the token from.")
    ] = None
    recipients: Annotated[
        List[AirdropRecipient], Field(min_length=1, description="Array of recipients.")
    ]
    transaction_memo: Annotated[
        Optional[str], Field(description="Optional transaction memo.")
    ] = None


class AirdropFungibleTokenParametersNormalised(BaseModelWithArbitraryTypes):
    token_id: TokenId
    token_transfers: List[TransferEntry]
    transaction_memo: Optional[str] = None


class MintFungibleTokenParameters(BaseModelWithArbitraryTypes):
    token_id: Annotated[str, Field(description="The id of the token.")]
    amount: Annotated[
        Union[int, float, str], Field(description="Amount of tokens to mint.")
    ]


class MintFungibleTokenParametersNormalised(BaseModelWithArbitraryTypes):
    token_id: TokenId
    amount: int


class MintNonFungibleTokenParameters(BaseModelWithArbitraryTypes):
    token_id: Annotated[str, Field(description="The id of the NFT class.")]
    uris: Annotated[
        List[str],
        Field(
            min_length=1,
            max_length=10,
            description="An array of URIs hosting NFT metadata.",
        ),
    ]


class MintNonFungibleTokenParametersNormalised(BaseModelWithArbitraryTypes):
    token_id: TokenId
    metadata: List[bytes]


class GetTokenInfoParameters(BaseModelWithArbitraryTypes):
    token_id: Annotated[
        Optional[str], Field(description="The token ID to query (e.g., 0.0.12345).")
    ] = None
