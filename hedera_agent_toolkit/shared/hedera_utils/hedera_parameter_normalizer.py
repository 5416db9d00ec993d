import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Type, TypeVar, cast

from hiero_sdk_python import (
    AccountId,
    ContractId,
    Hbar,
    PublicKey,
    SupplyType,
    TokenId,
    TokenType,
    TopicId,
)
from hiero_sdk_python.account.account_update_transaction import AccountUpdateParams
from hiero_sdk_python.tokens.token_create_transaction import TokenKeys, TokenParams
from pydantic import BaseModel, ValidationError
from web3 import Web3

from hedera_agent_toolkit.shared.configuration import Context
from hedera_agent_toolkit.shared.errors import (
    InvalidAmountError,
    InvalidParametersError,
    UnresolvableAccountError,
)
from hedera_agent_toolkit.shared.hedera_utils.decimals_utils import (
    to_base_unit,
    to_tinybars,
)
from hedera_agent_toolkit.shared.hedera_utils.mirrornode.hedera_mirrornode_service_interface import (
    IHederaMirrornodeService,
)
from hedera_agent_toolkit.shared.parameter_schemas import (
    AccountBalanceQueryParameters,
    AccountBalanceQueryParametersNormalised,
    AccountQueryParameters,
    AccountTokenBalancesQueryParameters,
    AccountTokenBalancesQueryParametersNormalised,
    AirdropFungibleTokenParameters,
    AirdropFungibleTokenParametersNormalised,
    ContractExecuteTransactionParametersNormalised,
    CreateAccountParameters,
    CreateAccountParametersNormalised,
    CreateERC20Parameters,
    CreateERC721Parameters,
    CreateFungibleTokenParameters,
    CreateFungibleTokenParametersNormalised,
    CreateNonFungibleTokenParameters,
    CreateNonFungibleTokenParametersNormalised,
    CreateTopicParameters,
    CreateTopicParametersNormalised,
    DeleteAccountParameters,
    DeleteAccountParametersNormalised,
    GetTokenInfoParameters,
    MintERC721Parameters,
    MintFungibleTokenParameters,
    MintFungibleTokenParametersNormalised,
    MintNonFungibleTokenParameters,
    MintNonFungibleTokenParametersNormalised,
    SubmitTopicMessageParameters,
    SubmitTopicMessageParametersNormalised,
    TopicMessagesQueryParameters,
    TopicMessagesQueryParametersNormalised,
    TransactionDetailsQueryParameters,
    TransactionDetailsQueryParametersNormalised,
    TransferEntry,
    TransferERC20Parameters,
    TransferERC721Parameters,
    TransferHbarParameters,
    TransferHbarParametersNormalised,
    UpdateAccountParameters,
    UpdateAccountParametersNormalised,
)
from hedera_agent_toolkit.shared.utils.account_resolver import AccountResolver

SchemaT = TypeVar("SchemaT", bound=BaseModel)

CONTRACT_DEPLOY_GAS = 3_000_000
CONTRACT_CALL_GAS = 100_000
MAX_ACCOUNT_MEMO_LENGTH = 100
DEFAULT_TOPIC_MESSAGES_LIMIT = 100

MIRROR_NODE_TRANSACTION_ID_REGEX = re.compile(r"^\d+\.\d+\.\d+-\d+-\d+$")
SDK_TRANSACTION_ID_REGEX = re.compile(r"^(\d+\.\d+\.\d+)@(\d+)\.(\d+)$")


class HederaParameterNormaliser:
    """Turns loosely typed tool input into the exact shape the builder needs.

    Every method validates its input against the operation's Pydantic schema,
    resolves implicit defaults (accounts, keys, decimals, supply types), converts
    display amounts to base units and returns the matching ``*Normalised`` model.
    Errors are raised as toolkit exceptions; the tool layer turns them into
    messages.
    """

    @staticmethod
    def parse_params_with_schema(params: Any, schema: Type[SchemaT]) -> SchemaT:
        """Validate and parse parameters using a Pydantic schema.

        Args:
            params: The raw input parameters (dict or model instance).
            schema: The Pydantic model to validate against.

        Returns:
            An instance of the validated Pydantic model.

        Raises:
            InvalidParametersError: If validation fails, with a formatted
                description of the issues.
        """
        if isinstance(params, BaseModel) and not isinstance(params, schema):
            params = params.model_dump()
        try:
            return schema.model_validate(params)
        except ValidationError as e:
            issues: str = HederaParameterNormaliser.format_validation_errors(e)
            raise InvalidParametersError(f"Invalid parameters: {issues}") from e

    @staticmethod
    def format_validation_errors(error: ValidationError) -> str:
        """Format Pydantic validation errors into a single human-readable string."""
        return "; ".join(
            f'Field "{".".join(str(part) for part in err["loc"])}" - {err["msg"]}'
            for err in error.errors()
        )

    @staticmethod
    def _encode_function_call(
        abi: List[Dict[str, Any]], function_name: str, args: List[Any]
    ) -> bytes:
        contract = Web3().eth.contract(abi=abi)
        encoded_data: str = contract.encode_abi(
            abi_element_identifier=function_name, args=args
        )
        return bytes.fromhex(encoded_data[2:])

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    @staticmethod
    async def normalise_create_account(
        params: CreateAccountParameters,
        context: Context,
        client: Any,
        mirrornode_service: IHederaMirrornodeService,
    ) -> CreateAccountParametersNormalised:
        """Normalise account-creation input into types the SDK expects.

        Actions performed:
        - Converts ``initial_balance`` to an ``Hbar`` instance (in tinybars).
        - Truncates ``account_memo`` to 100 characters.
        - Resolves the account key: ``params.public_key`` first, then the default
          account's key (context, mirror node, operator key).

        Args:
            params: Raw account creation parameters.
            context: Application context used for resolving defaults.
            client: Hedera client used to access the operator when needed.
            mirrornode_service: Mirror node service used to fetch account data.

        Returns:
            CreateAccountParametersNormalised: Parameters converted to SDK types.

        Raises:
            InvalidAmountError: If the initial balance is negative.
            InsufficientContextError: If no public key can be resolved.
        """
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, CreateAccountParameters
        )

        initial_balance = Hbar.from_tinybars(to_tinybars(parsed_params.initial_balance))

        account_memo: Optional[str] = parsed_params.account_memo
        if account_memo and len(account_memo) > MAX_ACCOUNT_MEMO_LENGTH:
            account_memo = account_memo[:MAX_ACCOUNT_MEMO_LENGTH]

        if parsed_params.public_key:
            key = PublicKey.from_string(parsed_params.public_key)
        else:
            key = await AccountResolver.get_default_public_key(
                context, client, mirrornode_service
            )

        return CreateAccountParametersNormalised(
            key=key,
            initial_balance=initial_balance,
            memo=account_memo,
            max_automatic_token_associations=parsed_params.max_automatic_token_associations,
        )

    @staticmethod
    def normalise_update_account(
        params: UpdateAccountParameters,
        context: Context,
        client: Any,
    ) -> UpdateAccountParametersNormalised:
        """Normalise account-update input; only provided fields are set.

        Raises:
            UnresolvableAccountError: If no account is given and no default exists.
        """
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, UpdateAccountParameters
        )

        account_id = AccountId.from_string(
            AccountResolver.resolve_account(parsed_params.account_id, context, client)
        )
        account_params = AccountUpdateParams(account_id=account_id)

        if parsed_params.account_memo is not None:
            account_params.account_memo = parsed_params.account_memo
        if parsed_params.max_automatic_token_associations is not None:
            account_params.max_automatic_token_associations = (
                parsed_params.max_automatic_token_associations
            )
        if parsed_params.staked_account_id is not None:
            account_params.staked_account_id = AccountId.from_string(
                parsed_params.staked_account_id
            )
        if parsed_params.decline_staking_reward is not None:
            account_params.decline_staking_reward = parsed_params.decline_staking_reward

        return UpdateAccountParametersNormalised(account_params=account_params)

    @staticmethod
    def normalise_delete_account(
        params: DeleteAccountParameters,
        context: Context,
        client: Any,
    ) -> DeleteAccountParametersNormalised:
        """Normalise delete account parameters.

        The remaining balance goes to ``transfer_account_id``, defaulting to the
        default account.

        Raises:
            InvalidParametersError: If the account ID is not a native Hedera id.
            UnresolvableAccountError: If no transfer account can be determined.
        """
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, DeleteAccountParameters
        )

        if not AccountResolver.is_hedera_address(parsed_params.account_id):
            raise InvalidParametersError("Account ID must be a Hedera address")

        transfer_account_id: str = AccountResolver.resolve_account(
            parsed_params.transfer_account_id, context, client
        )

        return DeleteAccountParametersNormalised(
            account_id=AccountId.from_string(parsed_params.account_id),
            transfer_account_id=AccountId.from_string(transfer_account_id),
        )

    @staticmethod
    def normalise_transfer_hbar(
        params: TransferHbarParameters,
        context: Context,
        client: Any,
    ) -> TransferHbarParametersNormalised:
        """Normalise HBAR transfer parameters into a balanced transfer list.

        Each recipient gets a positive tinybar entry and the source account one
        debit equal to the negated total, so the entries always sum to zero.
        Recipients may be native ids or EVM addresses.

        Args:
            params: Raw HBAR transfer parameters.
            context: Application context for resolving the source account.
            client: Hedera client used for account resolution.

        Returns:
            TransferHbarParametersNormalised: Transfer entries in tinybars.

        Raises:
            InvalidAmountError: If an amount is negative or is zero tinybars.
        """
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, TransferHbarParameters
        )

        source_account_id: str = AccountResolver.resolve_account(
            parsed_params.source_account_id, context, client
        )

        hbar_transfers: List[TransferEntry] = []
        total_tinybars: int = 0

        for transfer in parsed_params.transfers:
            try:
                tinybars = to_tinybars(transfer.amount)
            except InvalidAmountError as e:
                raise InvalidAmountError(
                    f"Invalid transfer amount: {transfer.amount}"
                ) from e
            if tinybars == 0:
                raise InvalidAmountError(f"Invalid transfer amount: {transfer.amount}")

            hbar_transfers.append(
                TransferEntry(
                    account_id=AccountId.from_string(transfer.account_id),
                    amount=tinybars,
                )
            )
            total_tinybars += tinybars

        hbar_transfers.append(
            TransferEntry(
                account_id=AccountId.from_string(source_account_id),
                amount=-total_tinybars,
            )
        )

        return TransferHbarParametersNormalised(
            hbar_transfers=hbar_transfers,
            transaction_memo=parsed_params.transaction_memo,
        )

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    @staticmethod
    async def normalise_create_fungible_token_params(
        params: CreateFungibleTokenParameters,
        context: Context,
        client: Any,
        mirrornode_service: IHederaMirrornodeService,
    ) -> CreateFungibleTokenParametersNormalised:
        """Normalise fungible token creation parameters.

        - Supply type defaults to infinite. A finite token must name a positive max supply;
          it is never inferred.
        - Initial and max supply are scaled by ``decimals`` to base units.
        - Treasury and auto-renew accounts default to the default account.
        - A supply key (the default account's public key) is set when requested.

        Raises:
            InvalidParametersError: If a finite token has no max supply, or the
                initial supply exceeds it.
            InvalidAmountError: If a supply amount is negative.
            UnresolvableAccountError: If no treasury account can be determined.
        """
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, CreateFungibleTokenParameters
        )

        default_account_id: Optional[str] = AccountResolver.get_default_account(
            context, client
        )
        treasury_account_id = parsed_params.treasury_account_id or default_account_id
        if not treasury_account_id:
            raise UnresolvableAccountError("Must include treasury account ID")

        decimals: int = parsed_params.decimals
        initial_supply: int = to_base_unit(parsed_params.initial_supply, decimals)

        supply_type = SupplyType.INFINITE
        max_supply: int = 0
        if parsed_params.supply_type == "finite":
            supply_type = SupplyType.FINITE
            if parsed_params.max_supply is None or parsed_params.max_supply <= 0:
                raise InvalidParametersError(
                    "Must include a positive max supply for finite supply type"
                )
            max_supply = to_base_unit(parsed_params.max_supply, decimals)
            if initial_supply > max_supply:
                raise InvalidParametersError(
                    f"Initial supply ({initial_supply}) cannot exceed max supply ({max_supply})"
                )

        keys: Optional[TokenKeys] = None
        if parsed_params.is_supply_key:
            supply_key = await AccountResolver.get_default_public_key(
                context, client, mirrornode_service
            )
            keys = TokenKeys(supply_key=supply_key)

        token_params = TokenParams(
            token_name=parsed_params.token_name,
            token_symbol=parsed_params.token_symbol,
            treasury_account_id=AccountId.from_string(treasury_account_id),
            decimals=decimals,
            initial_supply=initial_supply,
            token_type=TokenType.FUNGIBLE_COMMON,
            max_supply=max_supply,
            supply_type=supply_type,
            auto_renew_account_id=(
                AccountId.from_string(default_account_id) if default_account_id else None
            ),
        )

        return CreateFungibleTokenParametersNormalised(
            token_params=token_params, keys=keys
        )

    @staticmethod
    async def normalise_create_non_fungible_token_params(
        params: CreateNonFungibleTokenParameters,
        context: Context,
        client: Any,
        mirrornode_service: IHederaMirrornodeService,
    ) -> CreateNonFungibleTokenParametersNormalised:
        """Normalise NFT collection creation parameters.

        NFT collections are always finite (max supply defaults to 100) and always
        carry a supply key, otherwise nothing could ever be minted.
        """
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, CreateNonFungibleTokenParameters
        )

        default_account_id: Optional[str] = AccountResolver.get_default_account(
            context, client
        )
        treasury_account_id = parsed_params.treasury_account_id or default_account_id
        if not treasury_account_id:
            raise UnresolvableAccountError("Must include treasury account ID")

        supply_key: PublicKey = await AccountResolver.get_default_public_key(
            context, client, mirrornode_service
        )

        token_params = TokenParams(
            token_name=parsed_params.token_name,
            token_symbol=parsed_params.token_symbol,
            treasury_account_id=AccountId.from_string(treasury_account_id),
            decimals=0,
            initial_supply=0,
            token_type=TokenType.NON_FUNGIBLE_UNIQUE,
            max_supply=parsed_params.max_supply,
            supply_type=SupplyType.FINITE,
            auto_renew_account_id=(
                AccountId.from_string(default_account_id) if default_account_id else None
            ),
        )

        return CreateNonFungibleTokenParametersNormalised(
            token_params=token_params, keys=TokenKeys(supply_key=supply_key)
        )

    @staticmethod
    async def _get_token_decimals(
        token_id: str, mirrornode_service: IHederaMirrornodeService
    ) -> int:
        token_info = await mirrornode_service.get_token_info(token_id)
        return int(token_info.get("decimals") or 0)

    @staticmethod
    async def normalise_mint_fungible_token_params(
        params: MintFungibleTokenParameters,
        context: Context,
        mirrornode_service: IHederaMirrornodeService,
    ) -> MintFungibleTokenParametersNormalised:
        """Convert the display amount to base units using the token's decimals.

        Raises:
            InvalidAmountError: If the amount is negative or not numeric.
        """
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, MintFungibleTokenParameters
        )

        decimals = await HederaParameterNormaliser._get_token_decimals(
            parsed_params.token_id, mirrornode_service
        )

        return MintFungibleTokenParametersNormalised(
            token_id=TokenId.from_string(parsed_params.token_id),
            amount=to_base_unit(parsed_params.amount, decimals),
        )

    @staticmethod
    def normalise_mint_non_fungible_token_params(
        params: MintNonFungibleTokenParameters,
        context: Context,
    ) -> MintNonFungibleTokenParametersNormalised:
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, MintNonFungibleTokenParameters
        )
        return MintNonFungibleTokenParametersNormalised(
            token_id=TokenId.from_string(parsed_params.token_id),
            metadata=[uri.encode("utf-8") for uri in parsed_params.uris],
        )

    @staticmethod
    async def normalise_airdrop_fungible_token_params(
        params: AirdropFungibleTokenParameters,
        context: Context,
        client: Any,
        mirrornode_service: IHederaMirrornodeService,
    ) -> AirdropFungibleTokenParametersNormalised:
        """Normalise an airdrop into a balanced token transfer list.

        Amounts are scaled by the token decimals fetched from the mirror node.
        Zero amounts are kept as zero entries; negative amounts are rejected.

        Raises:
            InvalidAmountError: If a recipient amount is negative or not numeric.
        """
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, AirdropFungibleTokenParameters
        )

        source_account_id: str = AccountResolver.resolve_account(
            parsed_params.source_account_id, context, client
        )
        decimals = await HederaParameterNormaliser._get_token_decimals(
            parsed_params.token_id, mirrornode_service
        )

        token_transfers: List[TransferEntry] = []
        total_amount: int = 0

        for recipient in parsed_params.recipients:
            try:
                amount = to_base_unit(recipient.amount, decimals)
            except InvalidAmountError as e:
                raise InvalidAmountError(
                    f"Invalid recipient amount: {recipient.amount}"
                ) from e

            total_amount += amount
            token_transfers.append(
                TransferEntry(
                    account_id=AccountId.from_string(recipient.account_id),
                    amount=amount,
                )
            )

        token_transfers.append(
            TransferEntry(
                account_id=AccountId.from_string(source_account_id),
                amount=-total_amount,
            )
        )

        return AirdropFungibleTokenParametersNormalised(
            token_id=TokenId.from_string(parsed_params.token_id),
            token_transfers=token_transfers,
            transaction_memo=parsed_params.transaction_memo,
        )

    # ------------------------------------------------------------------
    # Consensus
    # ------------------------------------------------------------------

    @staticmethod
    async def normalise_create_topic_params(
        params: CreateTopicParameters,
        context: Context,
        client: Any,
        mirrornode_service: IHederaMirrornodeService,
    ) -> CreateTopicParametersNormalised:
        """Normalise 'create topic' parameters.

        The default account's public key becomes the admin key, and the submit key
        too when ``is_submit_key`` is set.

        Raises:
            UnresolvableAccountError: If a default account cannot be determined.
        """
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, CreateTopicParameters
        )

        default_account_id: AccountId = AccountResolver.resolve_default_account(
            context, client
        )
        account_public_key: PublicKey = await AccountResolver.get_default_public_key(
            context, client, mirrornode_service
        )

        return CreateTopicParametersNormalised(
            memo=parsed_params.topic_memo,
            transaction_memo=parsed_params.transaction_memo,
            admin_key=account_public_key,
            submit_key=account_public_key if parsed_params.is_submit_key else None,
            auto_renew_account_id=default_account_id,
        )

    @staticmethod
    def normalise_submit_topic_message(
        params: SubmitTopicMessageParameters,
    ) -> SubmitTopicMessageParametersNormalised:
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, SubmitTopicMessageParameters
        )

        if not AccountResolver.is_hedera_address(parsed_params.topic_id):
            raise InvalidParametersError("Topic ID must be a Hedera address")

        return SubmitTopicMessageParametersNormalised(
            topic_id=TopicId.from_string(parsed_params.topic_id),
            message=parsed_params.message,
            transaction_memo=parsed_params.transaction_memo,
        )

    # ------------------------------------------------------------------
    # EVM (ERC20 / ERC721 through factory and token contracts)
    # ------------------------------------------------------------------

    @staticmethod
    def normalise_create_erc20_params(
        params: CreateERC20Parameters,
        factory_contract_id: str,
        factory_contract_abi: List[Dict[str, Any]],
        factory_contract_function_name: str,
    ) -> ContractExecuteTransactionParametersNormalised:
        """Encode a ``deployToken(name, symbol, decimals, initialSupply)`` factory call.

        Args:
            params: Raw ERC20 creation parameters.
            factory_contract_id: Hedera id of the ERC20 factory contract.
            factory_contract_abi: ABI of the factory contract.
            factory_contract_function_name: Function to invoke (``deployToken``).

        Returns:
            ContractExecuteTransactionParametersNormalised: Contract call ready
            to be built.
        """
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, CreateERC20Parameters
        )

        function_parameters = HederaParameterNormaliser._encode_function_call(
            factory_contract_abi,
            factory_contract_function_name,
            [
                parsed_params.token_name,
                parsed_params.token_symbol,
                parsed_params.decimals,
                parsed_params.initial_supply,
            ],
        )

        return ContractExecuteTransactionParametersNormalised(
            contract_id=ContractId.from_string(factory_contract_id),
            function_parameters=function_parameters,
            gas=CONTRACT_DEPLOY_GAS,
        )

    @staticmethod
    def normalise_create_erc721_params(
        params: CreateERC721Parameters,
        factory_contract_id: str,
        factory_contract_abi: List[Dict[str, Any]],
        factory_contract_function_name: str,
    ) -> ContractExecuteTransactionParametersNormalised:
        """Encode a ``deployToken(name, symbol, baseURI)`` factory call."""
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, CreateERC721Parameters
        )

        function_parameters = HederaParameterNormaliser._encode_function_call(
            factory_contract_abi,
            factory_contract_function_name,
            [
                parsed_params.token_name,
                parsed_params.token_symbol,
                parsed_params.base_uri,
            ],
        )

        return ContractExecuteTransactionParametersNormalised(
            contract_id=ContractId.from_string(factory_contract_id),
            function_parameters=function_parameters,
            gas=CONTRACT_DEPLOY_GAS,
        )

    @staticmethod
    async def _resolve_evm_argument(
        address: str, mirrornode_service: IHederaMirrornodeService
    ) -> str:
        # contract calls take EVM addresses even when the caller gave a native id
        evm_address = await AccountResolver.get_hedera_evm_address(
            address, mirrornode_service
        )
        if not AccountResolver.is_evm_address(evm_address):
            raise InvalidParametersError(f"Invalid address: {address}")
        return Web3.to_checksum_address(
            evm_address if evm_address.startswith("0x") else f"0x{evm_address}"
        )

    @staticmethod
    async def _resolve_contract_id(
        contract_id: str, mirrornode_service: IHederaMirrornodeService
    ) -> ContractId:
        hedera_id = await AccountResolver.get_hedera_account_id(
            contract_id, mirrornode_service
        )
        return ContractId.from_string(hedera_id)

    @staticmethod
    async def normalise_transfer_erc20_params(
        params: TransferERC20Parameters,
        contract_abi: List[Dict[str, Any]],
        function_name: str,
        context: Context,
        mirrornode_service: IHederaMirrornodeService,
    ) -> ContractExecuteTransactionParametersNormalised:
        """Encode ``transfer(to, amount)`` on an ERC20 contract.

        The recipient is mapped to its EVM address and the contract to its native
        id, whichever form the caller used.
        """
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, TransferERC20Parameters
        )

        recipient_address = await HederaParameterNormaliser._resolve_evm_argument(
            parsed_params.recipient_address, mirrornode_service
        )
        contract_id = await HederaParameterNormaliser._resolve_contract_id(
            parsed_params.contract_id, mirrornode_service
        )

        function_parameters = HederaParameterNormaliser._encode_function_call(
            contract_abi, function_name, [recipient_address, parsed_params.amount]
        )

        return ContractExecuteTransactionParametersNormalised(
            contract_id=contract_id,
            function_parameters=function_parameters,
            gas=CONTRACT_CALL_GAS,
        )

    @staticmethod
    async def normalise_transfer_erc721_params(
        params: TransferERC721Parameters,
        contract_abi: List[Dict[str, Any]],
        function_name: str,
        context: Context,
        mirrornode_service: IHederaMirrornodeService,
    ) -> ContractExecuteTransactionParametersNormalised:
        """Encode ``transferFrom(from, to, tokenId)`` on an ERC721 contract."""
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, TransferERC721Parameters
        )

        from_address = await HederaParameterNormaliser._resolve_evm_argument(
            parsed_params.from_address, mirrornode_service
        )
        to_address = await HederaParameterNormaliser._resolve_evm_argument(
            parsed_params.to_address, mirrornode_service
        )
        contract_id = await HederaParameterNormaliser._resolve_contract_id(
            parsed_params.contract_id, mirrornode_service
        )

        function_parameters = HederaParameterNormaliser._encode_function_call(
            contract_abi,
            function_name,
            [from_address, to_address, parsed_params.token_id],
        )

        return ContractExecuteTransactionParametersNormalised(
            contract_id=contract_id,
            function_parameters=function_parameters,
            gas=CONTRACT_CALL_GAS,
        )

    @staticmethod
    async def normalise_mint_erc721_params(
        params: MintERC721Parameters,
        contract_abi: List[Dict[str, Any]],
        function_name: str,
        context: Context,
        mirrornode_service: IHederaMirrornodeService,
    ) -> ContractExecuteTransactionParametersNormalised:
        """Encode ``safeMint(to)`` on an ERC721 contract."""
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, MintERC721Parameters
        )

        to_address = await HederaParameterNormaliser._resolve_evm_argument(
            parsed_params.to_address, mirrornode_service
        )
        contract_id = await HederaParameterNormaliser._resolve_contract_id(
            parsed_params.contract_id, mirrornode_service
        )

        function_parameters = HederaParameterNormaliser._encode_function_call(
            contract_abi, function_name, [to_address]
        )

        return ContractExecuteTransactionParametersNormalised(
            contract_id=contract_id,
            function_parameters=function_parameters,
            gas=CONTRACT_CALL_GAS,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @staticmethod
    def normalise_get_hbar_balance(
        params: AccountBalanceQueryParameters,
        context: Context,
        client: Any,
    ) -> AccountBalanceQueryParametersNormalised:
        """Use the given account, or the default account when none is given."""
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, AccountBalanceQueryParameters
        )
        return AccountBalanceQueryParametersNormalised(
            account_id=AccountResolver.resolve_account(
                parsed_params.account_id, context, client
            )
        )

    @staticmethod
    def normalise_account_token_balances_params(
        params: AccountTokenBalancesQueryParameters,
        context: Context,
        client: Any,
    ) -> AccountTokenBalancesQueryParametersNormalised:
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, AccountTokenBalancesQueryParameters
        )
        return AccountTokenBalancesQueryParametersNormalised(
            account_id=AccountResolver.resolve_account(
                parsed_params.account_id, context, client
            ),
            token_id=parsed_params.token_id,
        )

    @staticmethod
    def normalise_get_account_query(
        params: AccountQueryParameters,
    ) -> AccountQueryParameters:
        return HederaParameterNormaliser.parse_params_with_schema(
            params, AccountQueryParameters
        )

    @staticmethod
    def normalise_get_token_info(
        params: GetTokenInfoParameters,
    ) -> GetTokenInfoParameters:
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, GetTokenInfoParameters
        )
        if not parsed_params.token_id:
            raise InvalidParametersError("Token ID is required")
        return parsed_params

    @staticmethod
    def _to_mirror_node_timestamp(value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
        delta = value - epoch
        seconds = delta.days * 86_400 + delta.seconds
        return f"{seconds}.{delta.microseconds * 1000:09d}"

    @staticmethod
    def normalise_get_topic_messages(
        params: TopicMessagesQueryParameters,
    ) -> TopicMessagesQueryParametersNormalised:
        """Convert ISO 8601 bounds to mirror node ``seconds.nanos`` timestamps."""
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, TopicMessagesQueryParameters
        )

        if not AccountResolver.is_hedera_address(parsed_params.topic_id):
            raise InvalidParametersError("Topic ID must be a Hedera address")

        to_timestamp = HederaParameterNormaliser._to_mirror_node_timestamp
        return TopicMessagesQueryParametersNormalised(
            topic_id=parsed_params.topic_id,
            lower_timestamp=(
                to_timestamp(parsed_params.start_time) if parsed_params.start_time else None
            ),
            upper_timestamp=(
                to_timestamp(parsed_params.end_time) if parsed_params.end_time else None
            ),
            limit=parsed_params.limit or DEFAULT_TOPIC_MESSAGES_LIMIT,
        )

    @staticmethod
    def normalise_get_transaction_details_params(
        params: TransactionDetailsQueryParameters,
    ) -> TransactionDetailsQueryParametersNormalised:
        """Normalise a transaction id to the mirror node format.

        SDK-style ids (``0.0.4177806@1755169980.051721264``) become
        ``0.0.4177806-1755169980-051721264``; mirror-style ids pass through.

        Raises:
            InvalidParametersError: If the id matches neither format.
        """
        parsed_params = HederaParameterNormaliser.parse_params_with_schema(
            params, TransactionDetailsQueryParameters
        )

        transaction_id = parsed_params.transaction_id.strip()
        if not MIRROR_NODE_TRANSACTION_ID_REGEX.match(transaction_id):
            match = SDK_TRANSACTION_ID_REGEX.match(transaction_id)
            if not match:
                raise InvalidParametersError(
                    f"Invalid transactionId format: {parsed_params.transaction_id}"
                )
            account_id, seconds, nanos = match.groups()
            # nanos are an integer count, the mirror node expects nine digits
            transaction_id = f"{account_id}-{seconds}-{int(nanos):09d}"

        return TransactionDetailsQueryParametersNormalised(
            transaction_id=transaction_id, nonce=parsed_params.nonce
        )
