from typing import Annotated, Optional

from pydantic import Field

from .base import BaseModelWithArbitraryTypes


class TransactionDetailsQueryParameters(BaseModelWithArbitraryTypes):
    transaction_id: Annotated[
        str,
        Field(
            description=(
                'The transaction ID, either "shard.realm.num-sss-nnn" or '
                '"shard.realm.num@sss.nnn".'
            )
        ),
    ]
    nonce: Annotated[
        Optional[int], Field(ge=0, description="Optional nonce of the transaction.")
    ] = None


class TransactionDetailsQueryParametersNormalised(BaseModelWithArbitraryTypes):
    transaction_id: str
    nonce: Optional[int] = None
