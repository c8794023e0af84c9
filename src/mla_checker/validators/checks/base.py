"""Helpers shared by the rule check modules."""

from __future__ import annotations

from collections.abc import Iterable

from mla_checker.domain.models.enums import CheckStatus
from mla_checker.domain.models.report import CheckResult, RuleDefinition


def make_result(
    rule: RuleDefinition,
    status: CheckStatus,
    details: str,
    suggestions: Iterable[str] = (),
    affected: Iterable[str] = (),
) -> CheckResult:
    """Build a CheckResult; a passing result never lists affected elements."""
    return CheckResult(
        rule=rule,
        status=status,
        details=details,
        suggestions=tuple(suggestions) if status != CheckStatus.PASSED else (),
        affected_elements=tuple(affected) if status != CheckStatus.PASSED else (),
    )


def status_for(passed: bool) -> CheckStatus:
    return CheckStatus.PASSED if passed else CheckStatus.FAILED


def within(value: int | float, target: int | float, tolerance: int | float) -> bool:
    """Inclusive tolerance comparison."""
    return abs(value - target) <= tolerance


class AffectedElements:
    """Ordered, de-duplicated collection of element labels."""

    def __init__(self) -> None:
        self._labels: dict[str, None] = {}

    def add(self, label: str) -> None:
        self._labels.setdefault(label, None)

    def __iter__(self):
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)
