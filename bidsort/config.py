"""Configuration loading utilities for Bid Sort."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .parsing import DEFAULT_STRIP_CHAR

DEFAULT_CSV_PATH = Path("eBid_Monthly_Sales.csv")


@dataclass
class ColumnMapping:
    """Zero-based positions of the bid fields within a source row."""

    title: int = 0
    bid_id: int = 1
    amount: int = 4
    fund: int = 8

    def as_dict(self) -> Dict[str, int]:
        return {
            "title": self.title,
            "bid_id": self.bid_id,
            "amount": self.amount,
            "fund": self.fund,
        }

    @property
    def required_width(self) -> int:
        return max(self.as_dict().values()) + 1


@dataclass
class ParsingConfig:
    """How raw field text is turned into bid values."""

    strip_char: str = DEFAULT_STRIP_CHAR
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        self.strip_char = validate_strip_char(self.strip_char)


@dataclass
class AppConfig:
    """Container for everything the menu driver needs."""

    csv_path: Path = DEFAULT_CSV_PATH
    columns: ColumnMapping = field(default_factory=ColumnMapping)
    parsing: ParsingConfig = field(default_factory=ParsingConfig)
    chunk_size: Optional[int] = None

    def resolved(self, base_path: Path) -> "AppConfig":
        return AppConfig(
            csv_path=_resolve_path(self.csv_path, base_path),
            columns=self.columns,
            parsing=self.parsing,
            chunk_size=self.chunk_size,
        )


def load_config(path: Path) -> AppConfig:
    """Load :class:`AppConfig` from a YAML file.

    Every section is optional; omitted values fall back to the dataclass
    defaults.  Relative paths are resolved against the file's directory.
    """

    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file '{config_path}' does not exist")

    with config_path.open("r", encoding="utf-8") as stream:
        raw_config: Mapping[str, Any] = yaml.safe_load(stream) or {}

    if not isinstance(raw_config, Mapping):
        raise ValueError("Configuration root must be a mapping")

    paths_section = raw_config.get("paths") or {}
    csv_path = Path(paths_section["csv"]) if "csv" in paths_section else DEFAULT_CSV_PATH

    columns = _parse_column_mapping(raw_config.get("columns") or {})
    parsing = ParsingConfig(**_parse_parsing_section(raw_config.get("parsing") or {}))
    chunk_size = _parse_chunk_size((raw_config.get("loading") or {}).get("chunk_size"))

    config = AppConfig(
        csv_path=csv_path,
        columns=columns,
        parsing=parsing,
        chunk_size=chunk_size,
    )
    return config.resolved(config_path.parent)


def validate_strip_char(value: Any) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"strip_char must be a single character, got {value!r}")
    return value


def _parse_column_mapping(section: Mapping[str, Any]) -> ColumnMapping:
    parsed: Dict[str, int] = {}
    for field_info in fields(ColumnMapping):
        if field_info.name not in section:
            continue
        value = section[field_info.name]
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(
                f"columns.{field_info.name} must be a non-negative integer, got {value!r}"
            )
        parsed[field_info.name] = value
    unknown = set(section) - {field_info.name for field_info in fields(ColumnMapping)}
    if unknown:
        raise ValueError("Unknown column keys: " + ", ".join(sorted(unknown)))
    return ColumnMapping(**parsed)


def _parse_parsing_section(section: Mapping[str, Any]) -> Dict[str, Any]:
    parsed: Dict[str, Any] = {}
    for key in ("strip_char", "encoding"):
        if key in section:
            parsed[key] = section[key]
    return parsed


def _parse_chunk_size(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"loading.chunk_size must be a positive integer, got {value!r}")
    return value


def _resolve_path(path: Path, base_path: Path) -> Path:
    expanded = Path(path).expanduser()
    if expanded.is_absolute():
        return expanded
    return (base_path / expanded).resolve()


__all__ = [
    "AppConfig",
    "ColumnMapping",
    "DEFAULT_CSV_PATH",
    "ParsingConfig",
    "load_config",
    "validate_strip_char",
]
