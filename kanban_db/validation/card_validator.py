"""
Card validation rules.

A card is valid when:
1. ``name`` is present, a string and non-empty
2. ``description``, if present, is a non-empty string
3. ``status``, if present, is one of the CardStatus values

"Present" means the key exists and is not None. The three rules are
combined with a plain conjunction.
"""

from typing import Any, List, Mapping, Optional
from pydantic import BaseModel

from ..interfaces.validator import IValidator, ValidationResult
from ..models.card import CardStatus

VALID_STATUS_CODES = frozenset(status.value for status in CardStatus)


def is_status_code_valid(code: Any) -> bool:
    """True when ``code`` is a CardStatus member or one of its string values."""
    if isinstance(code, CardStatus):
        return True
    return isinstance(code, str) and code in VALID_STATUS_CODES


def _as_mapping(card: Any) -> Optional[Mapping]:
    if isinstance(card, BaseModel):
        return card.model_dump()
    if isinstance(card, Mapping):
        return card
    return None


class CardValidator(IValidator):
    """Checks name, description and status of a candidate card"""

    name = "card_validator"

    def validate(self, card: Any) -> ValidationResult:
        fields = _as_mapping(card)
        if fields is None:
            return ValidationResult(
                is_valid=False,
                validator_name=self.name,
                messages=[f"card must be a mapping, got {type(card).__name__}"]
            )

        messages: List[str] = []

        name = fields.get("name")
        if not (isinstance(name, str) and len(name) > 0):
            messages.append("name is required and must be a non-empty string")

        description = fields.get("description")
        if description is not None and not (isinstance(description, str) and len(description) > 0):
            messages.append("description must be a non-empty string when provided")

        status = fields.get("status")
        if status is not None and not is_status_code_valid(status):
            messages.append(f"status must be one of {sorted(VALID_STATUS_CODES)}")

        return ValidationResult(
            is_valid=not messages,
            validator_name=self.name,
            messages=messages
        )


_default_validator = CardValidator()


def is_card_valid(card: Any) -> bool:
    """Pure, total validity check for a candidate card."""
    return _default_validator.validate(card).is_valid
