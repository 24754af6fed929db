"""Parse a touch configuration file into a TouchConfig.

The configuration is line oriented. Each trimmed line is classified into a
DirectiveKind and then applied to the running ParserState:

    SET author = "Jane Doe"
    <type .py>
    <prepend>
    <file>
    <append>
    author: <author>
    <raw>
    import sys

Parsing never stops early: malformed lines are recorded in
``TouchConfig.errors`` and skipped.
"""

import os
from dataclasses import dataclass, replace
from enum import Enum

from headertouch.config.model import Option, TouchConfig

_SET_PREFIX = "SET "
_TYPE_PREFIX = "<type "
_PREPEND = "<prepend>"
_APPEND = "<append>"
_RAW = "<raw>"


class DirectiveKind(Enum):
    BLANK = "blank"
    SET_VAR = "set_var"
    OPEN_TYPE = "open_type"
    PREPEND = "prepend"
    APPEND = "append"
    RAW = "raw"
    OPTION_LINE = "option_line"


@dataclass(frozen=True)
class ParserState:
    current_type: str | None = None
    prepend_mode: bool = False
    raw_mode: bool = False


def classify(line: str) -> DirectiveKind:
    """Classify an already-trimmed line. Prefixes are checked in priority order."""
    if not line:
        return DirectiveKind.BLANK
    if line.startswith(_SET_PREFIX):
        return DirectiveKind.SET_VAR
    if line.startswith(_TYPE_PREFIX):
        return DirectiveKind.OPEN_TYPE
    if line.startswith(_PREPEND):
        return DirectiveKind.PREPEND
    if line.startswith(_APPEND):
        return DirectiveKind.APPEND
    if line.startswith(_RAW):
        return DirectiveKind.RAW
    return DirectiveKind.OPTION_LINE


def strip_quotes(value: str) -> str:
    """Remove one pair of surrounding double quotes. Values shorter than two characters are kept."""
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def _parse_set(line: str) -> tuple[str, str]:
    """Split a SET line into (``<name>``, value). Raises ValueError without '='."""
    name, sep, value = line[len(_SET_PREFIX):].partition("=")
    if not sep:
        raise ValueError(f"Error: Invalid SET command syntax: {line}")
    return f"<{name.strip()}>", strip_quotes(value.strip())


def _type_name(line: str) -> str:
    name = line[len(_TYPE_PREFIX):]
    return name[:-1] if name.endswith(">") else name


def _apply_option_line(line: str, state: ParserState, config: TouchConfig, target_extension: str) -> None:
    if not state.current_type:
        config.errors.append(f"Error: Option {line} is not inside a type block")
    elif state.raw_mode and state.current_type == target_extension:
        config.raw_code.append(line)
    else:
        config.type_options[state.current_type].append(Option(line, state.prepend_mode))


def _apply(line: str, state: ParserState, config: TouchConfig, target_extension: str) -> ParserState:
    """Apply one line to *config* and return the parser state for the next line."""
    kind = classify(line)

    if kind is DirectiveKind.SET_VAR:
        try:
            name, value = _parse_set(line)
        except ValueError as exc:
            config.errors.append(str(exc))
        else:
            config.variables[name] = value
        return state
    if kind is DirectiveKind.OPEN_TYPE:
        type_name = _type_name(line)
        config.type_options.setdefault(type_name, [])
        return ParserState(current_type=type_name)
    if kind is DirectiveKind.PREPEND:
        return replace(state, prepend_mode=True)
    if kind is DirectiveKind.APPEND:
        return replace(state, prepend_mode=False)
    if kind is DirectiveKind.RAW:
        return replace(state, raw_mode=True)
    if kind is DirectiveKind.OPTION_LINE:
        _apply_option_line(line, state, config, target_extension)
    return state


def parse(text: str, target_extension: str) -> TouchConfig:
    """Parse configuration *text*, capturing raw code only for *target_extension*."""
    config = TouchConfig()
    state = ParserState()
    for raw_line in text.split("\n"):
        state = _apply(raw_line.strip(), state, config, target_extension)
    return config


def parse_config_file(path: str | os.PathLike, target_extension: str) -> TouchConfig:
    """Parse the configuration file at *path*.

    An unreadable file is not fatal: the result is an empty TouchConfig
    carrying a single error message. Bytes that are not valid UTF-8 are
    replaced rather than discarding the file.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError:
        return TouchConfig(errors=[f"Error: Could not open configuration file {path}"])
    return parse(text, target_extension)
