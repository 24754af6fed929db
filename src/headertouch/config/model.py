"""Data model produced by the configuration parser."""

from dataclasses import dataclass, field

ALL_TYPES = ".all"


@dataclass(frozen=True)
class Option:
    """A header line: literal text or a placeholder, placed before or after the defaults."""
    identifier: str
    is_prepend: bool


@dataclass
class TouchConfig:
    variables: dict[str, str] = field(default_factory=dict)
    type_options: dict[str, list[Option]] = field(default_factory=dict)
    raw_code: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)