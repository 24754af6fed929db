"""Target file handling: extension lookup, overwrite confirmation, creation and writing."""

import os
import sys
from contextlib import contextmanager

import click

CONFIRMATION_PHRASE = "overwrite"


class TargetFileError(Exception):
    """The target file could not be created or written."""


def extension_of(filename: str) -> str:
    """Return the extension of *filename* from its last dot, or "" when it has none."""
    base = os.path.basename(filename)
    dot = base.rfind(".")
    return base[dot:] if dot != -1 else ""


def confirm_overwrite(path: str) -> bool:
    """Ask twice before an existing file is replaced: a yes/no question, then a typed phrase."""
    action = "overwrite the file"
    if not click.confirm(f"Do you want to {action}?", default=False):
        return False
    typed = click.prompt(
        f'Please type "{CONFIRMATION_PHRASE}" to confirm that you want to {action}',
        default="",
        show_default=False,
    )
    return typed.strip() == CONFIRMATION_PHRASE


def create_target(path: str) -> None:
    """Create *path*, truncating it when it already exists."""
    try:
        with open(path, "w", encoding="utf-8"):
            pass
    except OSError as e:
        raise TargetFileError(f"Error: Could not create file {path}") from e


def write_target(path: str, content: str) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise TargetFileError(f"Error: Could not open file {path} for writing") from e


@contextmanager
def with_error_handling():
    try:
        yield
    except TargetFileError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
