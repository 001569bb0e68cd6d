from .card_validator import (
    CardValidator,
    VALID_STATUS_CODES,
    is_card_valid,
    is_status_code_valid,
)

__all__ = [
    "CardValidator",
    "VALID_STATUS_CODES",
    "is_card_valid",
    "is_status_code_valid",
]
