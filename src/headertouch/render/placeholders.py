"""Placeholder substitution for header options."""

import re
from datetime import date

DATE_PLACEHOLDER = "<date>"
FILE_PLACEHOLDER = "<file>"

_VARIABLE_RE = re.compile(r"<[^<>]+>")


def _substitute_variables(text: str, variables: dict[str, str]) -> str:
    """Replace every known ``<name>`` token in a single pass (values are not re-scanned)."""

    def _replacer(m: re.Match) -> str:
        token = m.group(0)
        return variables.get(token, token)

    return _VARIABLE_RE.sub(_replacer, text)


def resolve(identifier: str, filename: str, variables: dict[str, str], today: date | None = None) -> str:
    """Return the text for one option identifier.

    ``<date>`` and ``<file>`` are built in and apply to a whole option line.
    Any ``<name>`` token found in *variables*, alone or inside literal text,
    is replaced by its value. Everything else is kept as written.
    """
    if identifier == DATE_PLACEHOLDER:
        today = today or date.today()
        return f"DATE: {today.strftime('%Y-%m-%d')}"
    if identifier == FILE_PLACEHOLDER:
        return f"FILE: {filename}"
    return _substitute_variables(identifier, variables)
