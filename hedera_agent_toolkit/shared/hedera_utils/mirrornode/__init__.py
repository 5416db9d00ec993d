from .hedera_mirrornode_service_default_impl import HederaMirrornodeServiceDefaultImpl
from .hedera_mirrornode_service_interface import IHederaMirrornodeService
from .hedera_mirrornode_utils import get_mirrornode_service

__all__ = [
    "HederaMirrornodeServiceDefaultImpl",
    "IHederaMirrornodeService",
    "get_mirrornode_service",
]
