from typing import Optional

from hedera_agent_toolkit.shared.utils import LedgerId

from .hedera_mirrornode_service_default_impl import HederaMirrornodeServiceDefaultImpl
from .hedera_mirrornode_service_interface import IHederaMirrornodeService


def get_mirrornode_service(
    mirrornode_service: Optional[IHederaMirrornodeService],
    ledger_id: LedgerId,
) -> IHederaMirrornodeService:
    """Return the configured mirror node service, or the HTTP one for ``ledger_id``."""
    if mirrornode_service is not None:
        return mirrornode_service
    return HederaMirrornodeServiceDefaultImpl(ledger_id)
