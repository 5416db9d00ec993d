from .decimals_utils import HBAR_DECIMALS, to_base_unit, to_display_unit, to_tinybars

__all__ = ["HBAR_DECIMALS", "to_base_unit", "to_display_unit", "to_tinybars"]
