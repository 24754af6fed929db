"""Merge per-extension options and raw code into the header text block."""

from datetime import date
from typing import Callable

from headertouch.config.model import ALL_TYPES, Option, TouchConfig
from headertouch.render.comment_prefixes import comment_prefix_for
from headertouch.render.placeholders import resolve

_NEWLINE_ESCAPE = "\\n"


def merge_options(type_options: dict[str, list[Option]], target_extension: str) -> list[str]:
    """Order options as: target prepends, then every ``.all`` option, then target appends.

    Options in the ``.all`` group are never split by their prepend flag.
    """
    target = type_options.get(target_extension, [])
    prepend = [opt.identifier for opt in target if opt.is_prepend]
    append = [opt.identifier for opt in target if not opt.is_prepend]
    defaults = [opt.identifier for opt in type_options.get(ALL_TYPES, [])]
    return prepend + defaults + append


def _unquote_raw(line: str) -> str:
    if len(line) >= 2 and line[0] in "\"'":
        return line[1:-1]
    return line


def _render_raw_line(line: str) -> str:
    # The unquoted copy is only compared against the newline escape;
    # the line itself is written as it appears in the config.
    if _unquote_raw(line) == _NEWLINE_ESCAPE:
        return "\n"
    return line + "\n"


def render(
    config: TouchConfig,
    target_extension: str,
    filename: str,
    today: date | None = None,
    trace: Callable[[str], None] | None = None,
) -> str:
    """Build the text written to a freshly created file.

    Args:
        config: Parsed configuration.
        target_extension: Extension of the new file, including the dot.
        filename: Filename as given on the command line, used for ``<file>``.
        today: Date used for ``<date>``; defaults to the current local date.
        trace: Optional callback receiving each emitted line.

    Returns:
        Commented header lines followed, when present, by a blank line and the raw code.
    """
    prefix = comment_prefix_for(target_extension)
    lines = []
    for identifier in merge_options(config.type_options, target_extension):
        lines.append(f"{prefix}{resolve(identifier, filename, config.variables, today)}\n")

    if config.raw_code:
        lines.append("\n")
        lines.extend(_render_raw_line(line) for line in config.raw_code)

    if trace is not None:
        for line in lines:
            trace(line.rstrip("\n"))
    return "".join(lines)
