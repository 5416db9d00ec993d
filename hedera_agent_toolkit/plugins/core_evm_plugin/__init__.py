from hedera_agent_toolkit.shared.plugin import Plugin
from .create_erc20 import CreateERC20Tool, CREATE_ERC20_TOOL
from .create_erc721 import CreateERC721Tool, CREATE_ERC721_TOOL
from .mint_erc721 import MintERC721Tool, MINT_ERC721_TOOL
from .transfer_erc20 import TransferERC20Tool, TRANSFER_ERC20_TOOL
from .transfer_erc721 import TransferERC721Tool, TRANSFER_ERC721_TOOL

core_evm_plugin = Plugin(
    name="core-evm-plugin",
    version="1.0.0",
    description="A plugin for ERC20 and ERC721 tokens on the Hedera EVM",
    tools=lambda context: [
        CreateERC20Tool(context),
        TransferERC20Tool(context),
        CreateERC721Tool(context),
        MintERC721Tool(context),
        TransferERC721Tool(context),
    ],
)

core_evm_plugin_tool_names = {
    "CREATE_ERC20_TOOL": CREATE_ERC20_TOOL,
    "TRANSFER_ERC20_TOOL": TRANSFER_ERC20_TOOL,
    "CREATE_ERC721_TOOL": CREATE_ERC721_TOOL,
    "MINT_ERC721_TOOL": MINT_ERC721_TOOL,
    "TRANSFER_ERC721_TOOL": TRANSFER_ERC721_TOOL,
}

__all__ = [
    "core_evm_plugin",
    "core_evm_plugin_tool_names",
    "CreateERC20Tool",
    "CreateERC721Tool",
    "MintERC721Tool",
    "TransferERC20Tool",
    "TransferERC721Tool",
]
