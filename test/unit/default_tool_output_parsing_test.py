from hedera_agent_toolkit.shared.models import (
    ExecutedTransactionToolResponse,
    RawTransactionResponse,
    ReturnBytesToolResponse,
    ToolResponse,
)
from hedera_agent_toolkit.shared.utils.default_tool_output_parsing import (
    transaction_tool_output_parser,
    untyped_query_output_parser,
)


def test_executed_transaction_output():
    response = ExecutedTransactionToolResponse(
        human_message="done",
        raw=RawTransactionResponse(status="SUCCESS", transaction_id="0.0.1@1.2"),
    )

    parsed = transaction_tool_output_parser(response.to_json())

    assert parsed["humanMessage"] == "done"
    assert parsed["raw"]["status"] == "SUCCESS"
    assert parsed["raw"]["transactionId"] == "0.0.1@1.2"


def test_return_bytes_output():
    response = ReturnBytesToolResponse(human_message="sign me", bytes_data=b"\x01")

    assert transaction_tool_output_parser(response.to_json()) == {
        "raw": {"bytes": "01"},
        "humanMessage": "sign me",
    }


def test_error_output():
    response = ToolResponse(human_message="Failed: boom", error="Failed: boom")

    for parser in (transaction_tool_output_parser, untyped_query_output_parser):
        assert parser(response.to_json()) == {
            "raw": {"error": "Failed: boom"},
            "humanMessage": "Failed: boom",
        }


def test_non_json_output():
    assert untyped_query_output_parser("plain text") == {
        "raw": {"error": "plain text"},
        "humanMessage": "plain text",
    }


def test_query_output():
    response = ToolResponse(human_message="balance", extra={"hbarBalance": "1"})

    assert untyped_query_output_parser(response.to_json()) == {
        "raw": {"hbarBalance": "1"},
        "humanMessage": "balance",
    }
