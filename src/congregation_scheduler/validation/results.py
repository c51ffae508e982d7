import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a structural check; truthy when no errors were found."""

    valid: bool
    errors: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid


@dataclass(frozen=True)
class CleanResult(Generic[T]):
    """Outcome of validate-and-clean: errors block persistence, warnings are informational."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    cleaned_data: T | None = None

    def __bool__(self) -> bool:
        return self.valid


@dataclass
class CleaningLog:
    """Accumulates cleaner messages in the order they are produced."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def warn(self, message: str) -> None:
        logging.debug(f"warning: {message}")
        self.warnings.append(message)

    def error(self, message: str) -> None:
        logging.debug(f"error: {message}")
        self.errors.append(message)
