import pytest
from unittest.mock import MagicMock

from hiero_sdk_python import AccountId, Client

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.errors import InvalidParametersError
from hedera_agent_toolkit.shared.hedera_utils.hedera_parameter_normalizer import (
    HederaParameterNormaliser,
)
from hedera_agent_toolkit.shared.parameter_schemas import (
    AccountBalanceQueryParameters,
    AccountTokenBalancesQueryParameters,
    GetTokenInfoParameters,
    SubmitTopicMessageParameters,
    TopicMessagesQueryParameters,
    TransactionDetailsQueryParameters,
)


@pytest.fixture
def mock_client():
    client = MagicMock(spec=Client)
    client.operator_account_id = AccountId.from_string("0.0.2002")
    return client


@pytest.mark.parametrize(
    "transaction_id, expected",
    [
        ("0.0.4177806@1755169980.651721264", "0.0.4177806-1755169980-651721264"),
        ("0.0.4177806-1755169980-651721264", "0.0.4177806-1755169980-651721264"),
        ("  0.0.5@1.000000007 ", "0.0.5-1-000000007"),
        ("0.0.5@1.7", "0.0.5-1-000000007"),
    ],
)
def test_transaction_id_is_normalised(transaction_id, expected):
    result = HederaParameterNormaliser.normalise_get_transaction_details_params(
        TransactionDetailsQueryParameters(transaction_id=transaction_id)
    )
    assert result.transaction_id == expected
    assert result.nonce is None


@pytest.mark.parametrize("transaction_id", ["abc", "0.0.1@123", "0.0.1-123"])
def test_invalid_transaction_id_is_rejected(transaction_id):
    with pytest.raises(InvalidParametersError, match="Invalid transactionId format"):
        HederaParameterNormaliser.normalise_get_transaction_details_params(
            TransactionDetailsQueryParameters(transaction_id=transaction_id)
        )


def test_topic_time_window_is_converted():
    params = TopicMessagesQueryParameters(
        topic_id="0.0.6006",
        start_time="2025-01-01T00:00:00Z",
        end_time="2025-01-01T00:00:01.5+00:00",
    )

    result = HederaParameterNormaliser.normalise_get_topic_messages(params)

    assert result.topic_id == "0.0.6006"
    assert result.lower_timestamp == "1735689600.000000000"
    assert result.upper_timestamp == "1735689601.500000000"
    assert result.limit == 100


def test_topic_messages_without_window():
    result = HederaParameterNormaliser.normalise_get_topic_messages(
        TopicMessagesQueryParameters(topic_id="0.0.6006", limit=5)
    )

    assert result.lower_timestamp is None
    assert result.upper_timestamp is None
    assert result.limit == 5


def test_topic_id_must_be_native():
    with pytest.raises(InvalidParametersError, match="Topic ID"):
        HederaParameterNormaliser.normalise_get_topic_messages(
            TopicMessagesQueryParameters(topic_id="topic")
        )
    with pytest.raises(InvalidParametersError, match="Topic ID"):
        HederaParameterNormaliser.normalise_submit_topic_message(
            SubmitTopicMessageParameters(topic_id="topic", message="hi")
        )


def test_hbar_balance_defaults_to_context_account(mock_client):
    result = HederaParameterNormaliser.normalise_get_hbar_balance(
        AccountBalanceQueryParameters(), Context(account_id="0.0.1001"), mock_client
    )
    assert result.account_id == "0.0.1001"


def test_token_balances_default_to_operator(mock_client):
    result = HederaParameterNormaliser.normalise_account_token_balances_params(
        AccountTokenBalancesQueryParameters(token_id="0.0.5005"), Context(), mock_client
    )
    assert result.account_id == "0.0.2002"
    assert result.token_id == "0.0.5005"


def test_token_info_requires_token_id():
    with pytest.raises(InvalidParametersError, match="Token ID is required"):
        HederaParameterNormaliser.normalise_get_token_info(GetTokenInfoParameters())


def test_dict_params_are_validated():
    with pytest.raises(InvalidParametersError, match='Field "nonce"'):
        HederaParameterNormaliser.normalise_get_transaction_details_params(
            {"transaction_id": "0.0.1-1-1", "nonce": -1}
        )
