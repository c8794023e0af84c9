"""Compliance report models.

RuleDefinition is catalog configuration; CheckResult and AnalysisReport
are the engine's output and the contract presentation layers rely on.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from mla_checker.domain.models.enums import CheckStatus, RuleCategory, Severity


class RuleDefinition(BaseModel):
    """A single catalog entry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str
    severity: Severity = Severity.WARNING
    category: RuleCategory = RuleCategory.FORMATTING


class CheckResult(BaseModel):
    """Outcome of evaluating one rule."""

    model_config = ConfigDict(frozen=True)

    rule: RuleDefinition
    status: CheckStatus
    details: str
    suggestions: tuple[str, ...] = ()
    affected_elements: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.status == CheckStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status == CheckStatus.FAILED

    @property
    def icon(self) -> str:
        if self.status == CheckStatus.PASSED:
            return "✅"
        if self.status == CheckStatus.UNABLE_TO_VERIFY:
            return "❔"
        return "❌" if self.rule.severity == Severity.ERROR else "⚠️"


class AnalysisSummary(BaseModel):
    """Partition of the results by status and severity."""

    model_config = ConfigDict(frozen=True)

    passed: int = 0
    errors: int = 0
    warnings: int = 0
    infos: int = 0
    unverifiable: int = 0


class AnalysisReport(BaseModel):
    """Full MLA compliance report for one document."""

    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(0, ge=0, le=100)
    total_rules: int = 0
    passed_rules: int = 0
    failed_rules: int = 0
    unverifiable_rules: int = 0
    results: tuple[CheckResult, ...] = ()
    summary: AnalysisSummary = Field(default_factory=AnalysisSummary)

    @classmethod
    def from_results(cls, results: list[CheckResult]) -> AnalysisReport:
        """Aggregate per-rule results into counts, score and summary.

        The score only counts verifiable rules, so a document that lacks
        metadata is not penalized for it.
        """
        passed = sum(1 for r in results if r.status == CheckStatus.PASSED)
        failed = [r for r in results if r.status == CheckStatus.FAILED]
        unverifiable = sum(1 for r in results if r.status == CheckStatus.UNABLE_TO_VERIFY)

        verifiable = passed + len(failed)
        score = math.floor(passed / verifiable * 100 + 0.5) if verifiable else 0

        summary = AnalysisSummary(
            passed=passed,
            errors=sum(1 for r in failed if r.rule.severity == Severity.ERROR),
            warnings=sum(1 for r in failed if r.rule.severity == Severity.WARNING),
            infos=sum(1 for r in failed if r.rule.severity == Severity.INFO),
            unverifiable=unverifiable,
        )
        return cls(
            overall_score=score,
            total_rules=len(results),
            passed_rules=passed,
            failed_rules=len(failed),
            unverifiable_rules=unverifiable,
            results=tuple(results),
            summary=summary,
        )

    @property
    def is_compliant(self) -> bool:
        """True when no error-severity rule failed."""
        return self.summary.errors == 0

    def results_by_status(self, status: CheckStatus) -> list[CheckResult]:
        return [r for r in self.results if r.status == status]

    def result_for(self, rule_id: str) -> CheckResult:
        """Return the result of *rule_id* (KeyError when absent)."""
        for result in self.results:
            if result.rule.id == rule_id:
                return result
        raise KeyError(rule_id)
