from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from hiero_sdk_python import AccountId, ContractId, TokenId, TopicId


@dataclass(frozen=True)
class RawTransactionResponse:
    """Receipt fields of a submitted transaction."""

    status: str
    transaction_id: Optional[str] = None
    account_id: Optional[AccountId] = None
    token_id: Optional[TokenId] = None
    topic_id: Optional[TopicId] = None
    contract_id: Optional[ContractId] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "transactionId": self.transaction_id,
            "accountId": str(self.account_id) if self.account_id else None,
            "tokenId": str(self.token_id) if self.token_id else None,
            "topicId": str(self.topic_id) if self.topic_id else None,
            "contractId": str(self.contract_id) if self.contract_id else None,
        }


@dataclass
class ToolResponse:
    """Result of a tool call.

    ``error`` is set when the call failed; ``human_message`` then carries the same
    text so agents can relay it as is. ``extra`` holds tool specific payloads such
    as query results.
    """

    human_message: str = ""
    error: Optional[str] = None
    extra: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"humanMessage": self.human_message}
        if self.error is not None:
            result["error"] = self.error
        if self.extra is not None:
            result["raw"] = self.extra
        return result

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)


@dataclass
class ExecutedTransactionToolResponse(ToolResponse):
    """Outcome of the execute strategy."""

    raw: Optional[RawTransactionResponse] = None

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["raw"] = self.raw.to_dict() if self.raw else None
        if self.extra is not None:
            result["extra"] = self.extra
        return result


@dataclass
class ReturnBytesToolResponse(ToolResponse):
    """Outcome of the return-bytes strategy: a frozen, unsigned transaction."""

    bytes_data: bytes = field(default=b"")

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["bytes"] = self.bytes_data.hex()
        return result
