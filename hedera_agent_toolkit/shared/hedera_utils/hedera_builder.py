from hiero_sdk_python import (
    AccountCreateTransaction,
    AccountDeleteTransaction,
    AccountUpdateTransaction,
    ContractExecuteTransaction,
    TokenAirdropTransaction,
    TokenCreateTransaction,
    TokenMintTransaction,
    TopicCreateTransaction,
    TopicMessageSubmitTransaction,
    TransferTransaction,
)
from hiero_sdk_python.tokens.token_transfer import TokenTransfer
from hiero_sdk_python.transaction.transaction import Transaction

from hedera_agent_toolkit.shared.parameter_schemas import (
    AirdropFungibleTokenParametersNormalised,
    ContractExecuteTransactionParametersNormalised,
    CreateAccountParametersNormalised,
    CreateFungibleTokenParametersNormalised,
    CreateNonFungibleTokenParametersNormalised,
    CreateTopicParametersNormalised,
    DeleteAccountParametersNormalised,
    MintFungibleTokenParametersNormalised,
    MintNonFungibleTokenParametersNormalised,
    SubmitTopicMessageParametersNormalised,
    TransferHbarParametersNormalised,
    UpdateAccountParametersNormalised,
)


class HederaBuilder:
    """Helper class to build unsigned Hedera SDK transactions.

    Every method takes the normalised parameters of one operation and returns a
    transaction that has been neither frozen nor signed. No network access happens
    here; what to do with the transaction is decided by the transaction-mode
    strategy.
    """

    @staticmethod
    def _with_memo(tx: Transaction, memo) -> Transaction:
        if memo:
            tx.set_transaction_memo(memo)
        return tx

    @staticmethod
    def create_account(params: CreateAccountParametersNormalised) -> Transaction:
        """Build an AccountCreateTransaction.

        Args:
            params: Normalised account creation parameters.

        Returns:
            Transaction: AccountCreateTransaction ready for the strategy.
        """
        return AccountCreateTransaction(
            key=params.key,
            initial_balance=params.initial_balance,
            memo=params.memo,
            max_automatic_token_associations=params.max_automatic_token_associations,
        )

    @staticmethod
    def update_account(params: UpdateAccountParametersNormalised) -> Transaction:
        return AccountUpdateTransaction(params.account_params)

    @staticmethod
    def delete_account(params: DeleteAccountParametersNormalised) -> Transaction:
        return AccountDeleteTransaction(
            account_id=params.account_id,
            transfer_account_id=params.transfer_account_id,
        )

    @staticmethod
    def transfer_hbar(params: TransferHbarParametersNormalised) -> Transaction:
        """Build a TransferTransaction for transferring HBAR.

        Entries for the same account are summed by the SDK, so the transfer list
        stays balanced.

        Args:
            params: Normalised HBAR transfer parameters (tinybars).

        Returns:
            Transaction: TransferTransaction ready for the strategy.
        """
        tx: TransferTransaction = TransferTransaction()
        for transfer in params.hbar_transfers:
            tx.add_hbar_transfer(transfer.account_id, transfer.amount)
        return HederaBuilder._with_memo(tx, params.transaction_memo)

    @staticmethod
    def create_fungible_token(
        params: CreateFungibleTokenParametersNormalised,
    ) -> Transaction:
        """Build a TokenCreateTransaction for a fungible token.

        Args:
            params: Normalised parameters for creating a fungible token.

        Returns:
            Transaction: TokenCreateTransaction ready for the strategy.
        """
        return TokenCreateTransaction(
            token_params=params.token_params,
            keys=params.keys,
        )

    @staticmethod
    def create_non_fungible_token(
        params: CreateNonFungibleTokenParametersNormalised,
    ) -> Transaction:
        """Build a TokenCreateTransaction for an NFT collection."""
        return TokenCreateTransaction(
            token_params=params.token_params,
            keys=params.keys,
        )

    @staticmethod
    def mint_fungible_token(
        params: MintFungibleTokenParametersNormalised,
    ) -> Transaction:
        return TokenMintTransaction(token_id=params.token_id, amount=params.amount)

    @staticmethod
    def mint_non_fungible_token(
        params: MintNonFungibleTokenParametersNormalised,
    ) -> Transaction:
        return TokenMintTransaction(token_id=params.token_id, metadata=params.metadata)

    @staticmethod
    def airdrop_fungible_token(
        params: AirdropFungibleTokenParametersNormalised,
    ) -> Transaction:
        """Build a TokenAirdropTransaction for fungible tokens.

        Args:
            params: Normalised airdrop parameters, including the sender debit.

        Returns:
            Transaction: TokenAirdropTransaction ready for the strategy.
        """
        token_transfers = [
            TokenTransfer(params.token_id, entry.account_id, entry.amount)
            for entry in params.token_transfers
        ]
        tx = TokenAirdropTransaction(token_transfers=token_transfers)
        return HederaBuilder._with_memo(tx, params.transaction_memo)

    @staticmethod
    def create_topic(params: CreateTopicParametersNormalised) -> Transaction:
        """Build a TopicCreateTransaction with optional memo.

        Args:
            params: Normalised topic creation parameters.

        Returns:
            Transaction: TopicCreateTransaction ready for the strategy.
        """
        tx: TopicCreateTransaction = TopicCreateTransaction(
            memo=params.memo,
            admin_key=params.admin_key,
            submit_key=params.submit_key,
            auto_renew_account=params.auto_renew_account_id,
        )
        return HederaBuilder._with_memo(tx, params.transaction_memo)

    @staticmethod
    def submit_topic_message(
        params: SubmitTopicMessageParametersNormalised,
    ) -> Transaction:
        tx: TopicMessageSubmitTransaction = TopicMessageSubmitTransaction(
            topic_id=params.topic_id,
            message=params.message,
        )
        return HederaBuilder._with_memo(tx, params.transaction_memo)

    @staticmethod
    def execute_transaction(
        params: ContractExecuteTransactionParametersNormalised,
    ) -> Transaction:
        """Build a ContractExecuteTransaction.

        Args:
            params: Normalised contract execution parameters.

        Returns:
            Transaction: ContractExecuteTransaction ready for the strategy.
        """
        return ContractExecuteTransaction(
            contract_id=params.contract_id,
            gas=params.gas,
            function_parameters=params.function_parameters,
        )
