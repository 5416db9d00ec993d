from .contracts import (
    DEPLOY_TOKEN_FUNCTION_NAME,
    ERC20_FACTORY_ABI,
    ERC20_TRANSFER_FUNCTION_ABI,
    ERC20_TRANSFER_FUNCTION_NAME,
    ERC721_FACTORY_ABI,
    ERC721_MINT_FUNCTION_ABI,
    ERC721_MINT_FUNCTION_NAME,
    ERC721_TRANSFER_FUNCTION_ABI,
    ERC721_TRANSFER_FUNCTION_NAME,
    get_erc20_factory_address,
    get_erc721_factory_address,
)

__all__ = [
    "DEPLOY_TOKEN_FUNCTION_NAME",
    "ERC20_FACTORY_ABI",
    "ERC20_TRANSFER_FUNCTION_ABI",
    "ERC20_TRANSFER_FUNCTION_NAME",
    "ERC721_FACTORY_ABI",
    "ERC721_MINT_FUNCTION_ABI",
    "ERC721_MINT_FUNCTION_NAME",
    "ERC721_TRANSFER_FUNCTION_ABI",
    "ERC721_TRANSFER_FUNCTION_NAME",
    "get_erc20_factory_address",
    "get_erc721_factory_address",
]
