from datetime import datetime
from typing import Annotated, Optional

from hiero_sdk_python import AccountId, PublicKey, TopicId
from pydantic import Field

from .base import BaseModelWithArbitraryTypes


class CreateTopicParameters(BaseModelWithArbitraryTypes):
    is_submit_key: Annotated[
        bool, Field(description="Whether to set a submit key for the topic.")
    ] = False
    topic_memo: Annotated[
        Optional[str], Field(description="Memo for the topic.")
    ] = None
    transaction_memo: Annotated[
        Optional[str], Field(description="Memo for the transaction.")
    ] = None


class CreateTopicParametersNormalised(BaseModelWithArbitraryTypes):
    memo: Optional[str] = None
    transaction_memo: Optional[str] = None
    admin_key: Optional[PublicKey] = None
    submit_key: Optional[PublicKey] = None
    auto_renew_account_id: Optional[AccountId] = None


class SubmitTopicMessageParameters(BaseModelWithArbitraryTypes):
    topic_id: Annotated[
        str, Field(description="The ID of the topic to submit the message to.")
    ]
    message: Annotated[str, Field(description="The message to submit.")]
    transaction_memo: Annotated[
        Optional[str], Field(description="Memo for the transaction.")
    ] = None


class SubmitTopicMessageParametersNormalised(BaseModelWithArbitraryTypes):
    topic_id: TopicId
    message: str
    transaction_memo: Optional[str] = None


class TopicMessagesQueryParameters(BaseModelWithArbitraryTypes):
    topic_id: Annotated[str, Field(description="The topic ID to query.")]
    start_time: Annotated[
        Optional[datetime],
        Field(description="Return messages after this ISO 8601 timestamp."),
    ] = None
    end_time: Annotated[
        Optional[datetime],
        Field(description="Return messages before this ISO 8601 timestamp."),
    ] = None
    limit: Annotated[
        Optional[int], Field(gt=0, description="Maximum number of messages to return.")
    ] = None


class TopicMessagesQueryParametersNormalised(BaseModelWithArbitraryTypes):
    topic_id: str
    lower_timestamp: Optional[str] = None
    upper_timestamp: Optional[str] = None
    limit: int = 100
