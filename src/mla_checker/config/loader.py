"""Rule catalog loading.

The packaged ``mla9_default.json`` holds the catalog the engine runs with.
A user catalog (``mla --config``) replaces it wholesale; either way the file
is parsed and validated once per process and then served from the cache.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from mla_checker.config.models import MLAConfig
from mla_checker.domain.errors import ConfigurationError

_DEFAULT_CONFIG_PATH = Path(__file__).parent / "mla9_default.json"

# Validated catalogs keyed by resolved file path
_catalogs: dict[Path, MLAConfig] = {}


def _read_catalog(path: Path) -> dict:
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Config file is not valid JSON: {path} ({exc})") from exc


def load_config(path: Optional[Union[str, Path]] = None) -> MLAConfig:
    """Return the validated rule catalog at *path* (the packaged one if omitted).

    Raises ``FileNotFoundError`` for a missing file, ``ConfigurationError``
    when the file is not JSON and ``pydantic.ValidationError`` when the
    catalog does not define exactly the rules the engine checks.
    """
    key = Path(path or _DEFAULT_CONFIG_PATH).resolve()
    cached = _catalogs.get(key)
    if cached is None:
        cached = _catalogs[key] = MLAConfig.model_validate(_read_catalog(key))
    return cached


def get_config() -> MLAConfig:
    """The packaged MLA 9 catalog."""
    return load_config()


def clear_cache() -> None:
    _catalogs.clear()
