from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ValidationResult:
    """
    Outcome of validating a hosts document.

    ``errors`` make the document unacceptable for a strict load.
    ``warnings`` describe tolerated oddities (e.g. a host bound twice,
    where the first binding wins).
    """
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def __bool__(self) -> bool:
        return self.is_valid
