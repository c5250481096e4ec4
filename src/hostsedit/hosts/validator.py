"""
Document-level validation of hosts lines.

Strict loads reject what an OS resolver would silently tolerate:

- a non-comment row that is not an ``<ip> <host>...`` mapping
- a hostname bound on more than one non-comment row

The same walk is used by tolerant loads, which only report the
duplicates as warnings since the first binding wins.
"""
from typing import Iterable

from hostsedit.core.document_line import HostsLine
from hostsedit.core.validation_result import ValidationResult


def validate_strict(lines: Iterable[HostsLine]) -> ValidationResult:
    """
    Validate every non-comment line of a hosts document.

    Args:
        lines: Lines in document order.

    Returns:
        ValidationResult whose errors are fatal for a strict load.
        Duplicate bindings are also listed in ``warnings`` so tolerant
        callers can report them.
    """
    errors: list[str] = []
    warnings: list[str] = []
    first_seen: dict[str, int] = {}

    for position, line in enumerate(lines):
        if line.is_comment:
            continue
        if not line.is_mapping:
            errors.append(
                f"Line {position + 1} is not an IP mapping: "
                f"'{line.raw_passthrough}'."
            )
            continue
        for host in line.hosts:
            if host not in first_seen:
                first_seen[host] = position
                continue
            message = (
                f"Host '{host}' on line {position + 1} is already bound "
                f"on line {first_seen[host] + 1}."
            )
            errors.append(message)
            warnings.append(message)

    return ValidationResult(errors=errors, warnings=warnings)
