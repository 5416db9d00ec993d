from hedera_agent_toolkit.shared.plugin import Plugin
from .airdrop_fungible_token import (
    AirdropFungibleTokenTool,
    AIRDROP_FUNGIBLE_TOKEN_TOOL,
)
from .create_fungible_token import CreateFungibleTokenTool, CREATE_FUNGIBLE_TOKEN_TOOL
from .create_non_fungible_token import (
    CreateNonFungibleTokenTool,
    CREATE_NON_FUNGIBLE_TOKEN_TOOL,
)
from .mint_fungible_token import MintFungibleTokenTool, MINT_FUNGIBLE_TOKEN_TOOL
from .mint_non_fungible_token import (
    MintNonFungibleTokenTool,
    MINT_NON_FUNGIBLE_TOKEN_TOOL,
)

core_token_plugin = Plugin(
    name="core-token-plugin",
    version="1.0.0",
    description="A plugin for the Hedera Token Service",
    tools=lambda context: [
        CreateFungibleTokenTool(context),
        CreateNonFungibleTokenTool(context),
        MintFungibleTokenTool(context),
        MintNonFungibleTokenTool(context),
        AirdropFungibleTokenTool(context),
    ],
)

core_token_plugin_tool_names = {
    "CREATE_FUNGIBLE_TOKEN_TOOL": CREATE_FUNGIBLE_TOKEN_TOOL,
    "CREATE_NON_FUNGIBLE_TOKEN_TOOL": CREATE_NON_FUNGIBLE_TOKEN_TOOL,
    "MINT_FUNGIBLE_TOKEN_TOOL": MINT_FUNGIBLE_TOKEN_TOOL,
    "MINT_NON_FUNGIBLE_TOKEN_TOOL": MINT_NON_FUNGIBLE_TOKEN_TOOL,
    "AIRDROP_FUNGIBLE_TOKEN_TOOL": AIRDROP_FUNGIBLE_TOKEN_TOOL,
}

__all__ = [
    "core_token_plugin",
    "core_token_plugin_tool_names",
    "AirdropFungibleTokenTool",
    "CreateFungibleTokenTool",
    "CreateNonFungibleTokenTool",
    "MintFungibleTokenTool",
    "MintNonFungibleTokenTool",
]
