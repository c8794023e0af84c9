"""MLA 9 configuration package."""

from mla_checker.config.loader import get_config, load_config
from mla_checker.config.models import MLAConfig

__all__ = ["MLAConfig", "get_config", "load_config"]
