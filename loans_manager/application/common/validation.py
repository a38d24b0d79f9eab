"""
ValidationResult - Ordered list of rule violations for a command.

Validators append to it instead of raising, so every broken rule is reported
in one response.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationFailure:
    field: str
    attempted_value: Any
    code: str
    message: str


@dataclass
class ValidationResult:
    errors: list[ValidationFailure] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(
        self, field_name: str, attempted_value: Any, code: str, message: str
    ) -> None:
        self.errors.append(
            ValidationFailure(
                field=field_name,
                attempted_value=attempted_value,
                code=code,
                message=message,
            )
        )

    @property
    def codes(self) -> list[str]:
        return [error.code for error in self.errors]

    @classmethod
    def single(
        cls, field_name: str, attempted_value: Any, code: str, message: str
    ) -> "ValidationResult":
        result = cls()
        result.add_error(field_name, attempted_value, code, message)
        return result
