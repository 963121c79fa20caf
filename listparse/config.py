"""TOML configuration loader for the list ingestion pipeline."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .models import FOOD_CATEGORIES, ListType

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

_OUTPUT_FORMATS = ("text", "json")


@dataclass
class PipelineConfig:
    list_type: str = ListType.GROCERY.value
    split_compounds: bool = True


@dataclass
class CategoryConfig:
    # category label → extra keywords, checked before the built-in rules
    keywords: dict[str, list[str]] = field(default_factory=dict)


@dataclass
class OutputConfig:
    format: str = "text"
    group: bool = False


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class ListParseConfig:
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    categories: CategoryConfig = field(default_factory=CategoryConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> ListParseConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    LISTPARSE_LIST_TYPE and LISTPARSE_LOG_LEVEL fill values the file
    leaves unset.

    Raises:
        ValueError: If a list type, category label, output format or log
            level is not recognized.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    pln = raw.get("pipeline", {})
    cat = raw.get("categories", {})
    out = raw.get("output", {})
    log = raw.get("logging", {})

    # Resolve values: config file → environment variable → default
    list_type = pln.get("list_type", "") or os.environ.get(
        "LISTPARSE_LIST_TYPE", ""
    ) or ListType.GROCERY.value
    log_level = log.get("level", "") or os.environ.get(
        "LISTPARSE_LOG_LEVEL", ""
    ) or "WARNING"

    list_type = ListType.coerce(list_type).value

    keywords: dict[str, list[str]] = {}
    for category, words in cat.items():
        if category not in FOOD_CATEGORIES:
            raise ValueError(
                f"Unknown category in [categories]: {category!r}"
            )
        if isinstance(words, str):
            words = [words]
        keywords[category] = [str(w) for w in words]

    output_format = str(out.get("format", "text")).lower()
    if output_format not in _OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output format: {output_format!r}  (text / json)"
        )

    log_level = str(log_level).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown log level: {log_level!r}")

    return ListParseConfig(
        pipeline=PipelineConfig(
            list_type=list_type,
            split_compounds=bool(pln.get("split_compounds", True)),
        ),
        categories=CategoryConfig(keywords=keywords),
        output=OutputConfig(
            format=output_format,
            group=bool(out.get("group", False)),
        ),
        logging=LoggingConfig(level=log_level),
    )
