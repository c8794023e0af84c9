"""MLA rule evaluation: the engine and its checks."""

from mla_checker.validators.engine import MLARulesEngine

__all__ = ["MLARulesEngine"]
