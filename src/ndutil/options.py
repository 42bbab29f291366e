"""Formatting options and their loading from TOML / JSON files."""

from __future__ import annotations

import json
import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Knobs for :func:`ndutil.number_format.format_number`.

    ``precision`` is the default number of decimal places; values whose
    magnitude lies strictly between ``lower`` and ``upper`` (or is zero) are
    written in plain notation, everything else in ``<mantissa>E<exp>`` form.
    """

    precision: int = 5
    lower: float = 0.0001
    upper: float = 1_000_000

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0 (got {self.precision})")
        if not self.lower < self.upper:
            raise ValueError(
                f"lower bound must be below upper bound ({self.lower} >= {self.upper})"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FormatOptions":
        """Build options from a dict, ignoring keys that are not options."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


DEFAULT_OPTIONS = FormatOptions()


def load_options(path: Path | str, section: str = "ndutil") -> FormatOptions:
    """Read :class:`FormatOptions` from a ``.toml`` or ``.json`` file.

    If the file has a top-level table named *section* (``[ndutil]`` by
    default) only that table is used; otherwise the whole document is.

    Raises:
        FileNotFoundError: *path* does not exist.
        ValueError: unsupported extension or invalid option values.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    if path.suffix == ".toml":
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    elif path.suffix == ".json":
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    else:
        raise ValueError(f"Unsupported config format: {path.suffix}")

    scoped = data.get(section)
    if isinstance(scoped, Mapping):
        data = scoped
    logger.debug("Loaded format options from %s: %s", path, data)
    return FormatOptions.from_mapping(data)
