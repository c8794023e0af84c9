"""Pydantic models for the MLA 9 configuration.

These models validate and type the JSON configuration file that holds the
rule catalog: id, display name, description, severity and category of
every rule the engine evaluates.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from mla_checker.domain.models.report import RuleDefinition

# Rule ids the engine has checks for; a catalog must define exactly these.
KNOWN_RULE_IDS: frozenset[str] = frozenset(
    {
        "font-family",
        "font-size",
        "line-spacing",
        "margins",
        "first-line-indent",
        "header-format",
        "title-formatting",
        "works-cited",
        "paragraph-alignment",
        "excessive-formatting",
        "heading-format",
        "paper-size",
        "hanging-indent-works-cited",
        "in-text-citations",
        "works-cited-alphabetical",
    }
)


# ---------------------------------------------------------------------------
# Meta
# ---------------------------------------------------------------------------


class MetaData(BaseModel):
    """Metadata about the standard being checked."""

    standard: str = "MLA"
    edition: str = "9th"
    language: str = "English"
    description: str = "Formatting rules for MLA 9 student papers"


# ---------------------------------------------------------------------------
# Root config
# ---------------------------------------------------------------------------


class MLAConfig(BaseModel):
    """Root configuration: metadata plus the rule catalog."""

    metadata: MetaData = Field(default_factory=MetaData)
    rules: list[RuleDefinition] = Field(default_factory=list)

    @field_validator("rules")
    @classmethod
    def _catalog_matches_engine(cls, rules: list[RuleDefinition]) -> list[RuleDefinition]:
        ids = [r.id for r in rules]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate rule ids: {', '.join(duplicates)}")
        missing = sorted(KNOWN_RULE_IDS - set(ids))
        if missing:
            raise ValueError(f"Missing rule definitions: {', '.join(missing)}")
        unknown = sorted(set(ids) - KNOWN_RULE_IDS)
        if unknown:
            raise ValueError(f"Unknown rule ids: {', '.join(unknown)}")
        return rules

    def rule(self, rule_id: str) -> RuleDefinition:
        """Return the catalog entry for *rule_id* (KeyError when absent)."""
        for rule in self.rules:
            if rule.id == rule_id:
                return rule
        raise KeyError(rule_id)
