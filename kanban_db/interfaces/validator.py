"""
Validator interface - defines contract for card validation strategies.
"""

from abc import ABC, abstractmethod
from typing import Any, List
from pydantic import BaseModel


class ValidationResult(BaseModel):
    """Result of a validation check"""
    is_valid: bool
    validator_name: str
    messages: List[str] = []


class IValidator(ABC):
    """
    Interface for card validators.

    Implementations must be pure and total: any input yields a result,
    never an exception.
    """

    @abstractmethod
    def validate(self, card: Any) -> ValidationResult:
        """
        Validate a candidate card.

        Args:
            card: Mapping (or pydantic model) with the card fields

        Returns:
            ValidationResult with validity status and messages
        """
        pass
