from __future__ import annotations

import logging
import re
from typing import Optional

from hiero_sdk_python import AccountId, Client, PublicKey

from hedera_agent_toolkit.shared.configuration import AgentMode, Context
from hedera_agent_toolkit.shared.errors import (
    InsufficientContextError,
    NetworkError,
    UnresolvableAccountError,
)
from hedera_agent_toolkit.shared.hedera_utils.mirrornode.hedera_mirrornode_service_interface import (
    IHederaMirrornodeService,
)

logger = logging.getLogger(__name__)

HEDERA_ADDRESS_REGEX = re.compile(r"^\d+\.\d+\.\d+$")
EVM_ADDRESS_REGEX = re.compile(r"^(0x)?[0-9a-fA-F]{40}$")


class AccountResolver:
    """Resolves account identifiers against the context, the client and the mirror node.

    Callers may pass native ids (``0.0.1234``) or EVM addresses interchangeably;
    this class is the single place where defaults and address forms are decided.
    Nothing is cached: every call re-resolves.
    """

    @staticmethod
    def is_hedera_address(address: Optional[str]) -> bool:
        return address is not None and HEDERA_ADDRESS_REGEX.match(address) is not None

    @staticmethod
    def is_evm_address(address: Optional[str]) -> bool:
        return address is not None and EVM_ADDRESS_REGEX.match(address) is not None

    @staticmethod
    def get_default_account(context: Context, client: Client) -> Optional[str]:
        """Return the context account, falling back to the client operator."""
        if context.account_id:
            return context.account_id
        operator_account_id = getattr(client, "operator_account_id", None)
        if operator_account_id:
            return str(operator_account_id)
        return None

    @staticmethod
    def resolve_default_account(context: Context, client: Client) -> AccountId:
        """Return the default account as an ``AccountId``.

        Raises:
            UnresolvableAccountError: If neither the context nor the client
                provides an account.
        """
        default_account_id = AccountResolver.get_default_account(context, client)
        if not default_account_id:
            raise UnresolvableAccountError(
                "Could not determine default account ID: set context.account_id "
                "or configure a client operator"
            )
        return AccountId.from_string(default_account_id)

    @staticmethod
    def resolve_account(
        account_id: Optional[str], context: Context, client: Client
    ) -> str:
        """Return ``account_id`` unchanged when given, else the default account.

        EVM addresses are passed through: native transfers accept them as aliases.
        """
        if account_id:
            return account_id
        return str(AccountResolver.resolve_default_account(context, client))

    @staticmethod
    async def get_hedera_evm_address(
        address: str, mirrornode_service: IHederaMirrornodeService
    ) -> str:
        """Map a native id to its EVM address; EVM input is returned as is."""
        if not AccountResolver.is_hedera_address(address):
            return address
        account = await mirrornode_service.get_account(address)
        evm_address = account.get("evm_address")
        if not evm_address:
            raise UnresolvableAccountError(f"No EVM address found for account {address}")
        return evm_address

    @staticmethod
    async def get_hedera_account_id(
        address: str, mirrornode_service: IHederaMirrornodeService
    ) -> str:
        """Map an EVM address to its native id; native input is returned as is."""
        if AccountResolver.is_hedera_address(address):
            return address
        account = await mirrornode_service.get_account(address)
        account_id = account.get("account_id")
        if not account_id:
            raise UnresolvableAccountError(f"No Hedera account found for address {address}")
        return account_id

    @staticmethod
    def get_operator_public_key(client: Client) -> Optional[PublicKey]:
        private_key = getattr(client, "operator_private_key", None)
        if private_key:
            return private_key.public_key()
        return None

    @staticmethod
    async def get_default_public_key(
        context: Context,
        client: Client,
        mirrornode_service: Optional[IHederaMirrornodeService] = None,
    ) -> PublicKey:
        """Resolve the public key of the default account.

        Order: ``context.account_public_key``, the key the mirror node publishes for
        the default account, then the client operator key.

        Raises:
            InsufficientContextError: If no source yields a key.
        """
        if context.account_public_key:
            return PublicKey.from_string(context.account_public_key)

        default_account_id = AccountResolver.get_default_account(context, client)
        if mirrornode_service is not None and default_account_id:
            try:
                account = await mirrornode_service.get_account(default_account_id)
                public_key = account.get("account_public_key")
                if public_key:
                    return PublicKey.from_string(public_key)
            except NetworkError as e:
                logger.warning(
                    "Mirror node key lookup for %s failed, using operator key: %s",
                    default_account_id,
                    e,
                )

        operator_public_key = AccountResolver.get_operator_public_key(client)
        if operator_public_key is None:
            raise InsufficientContextError(
                "Could not determine a public key for the default account"
            )
        return operator_public_key

    @staticmethod
    def get_default_account_description(context: Context) -> str:
        if context.mode == AgentMode.RETURN_BYTES and context.account_id:
            return f"user account ({context.account_id})"
        if context.account_id:
            return f"configured account ({context.account_id})"
        return "operator account"
