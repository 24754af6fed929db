"""Click entry point for the touch command."""

import os
import sys

import click

from headertouch import __version__
from headertouch.config import parse_config_file
from headertouch.render import render
from headertouch.target_file import (
    confirm_overwrite,
    create_target,
    extension_of,
    with_error_handling,
    write_target,
)
from headertouch.templates.template_renderer import render_template

PROG_NAME = "touch"
CONFIG_FILENAME = "touch.conf"
CONFIG_ENVVAR = "TOUCH_CONFIG"


def default_config_path() -> str:
    """The configuration file beside the running executable."""
    exe_dir = os.path.dirname(os.path.abspath(sys.argv[0]))
    return os.path.join(exe_dir, CONFIG_FILENAME)


def _usage(config_path):
    return render_template(
        "usage.j2", prog=PROG_NAME, config_path=config_path, config_envvar=CONFIG_ENVVAR,
    )


def _debug_echo(line):
    click.echo(line, err=True)


@click.command(PROG_NAME, add_help_option=False, context_settings={"ignore_unknown_options": True})
@click.argument("filenames", nargs=-1, type=click.UNPROCESSED)
@click.option("--config", "config_path", envvar=CONFIG_ENVVAR, type=click.Path(dir_okay=False),
              help="Configuration file to use.")
@click.option("--debug", is_flag=True, help="Print each generated line to stderr.")
@click.option("--help", "show_help", is_flag=True, help="Display this help message.")
@click.version_option(__version__, prog_name=PROG_NAME, message="%(prog)s %(version)s")
def main(filenames, config_path, debug, show_help):
    """Create FILE pre-populated with a header built from the configuration file.

    Only the first FILE is used; further arguments are ignored.
    """
    filename = filenames[0] if filenames else None
    config_path = config_path or default_config_path()

    if show_help:
        click.echo(_usage(config_path), nl=False)
        return
    if not filename:
        click.echo("Error: No file name provided", err=True)
        click.echo(_usage(config_path), nl=False)
        sys.exit(1)

    if os.path.exists(filename):
        click.echo(f"Error: File {filename} already exists", err=True)
        if not confirm_overwrite(filename):
            click.echo("Aborting file creation...")
            sys.exit(1)

    with with_error_handling():
        create_target(filename)
        extension = extension_of(filename)
        if debug:
            _debug_echo(f"Created file of type {extension}: {filename}")

        config = parse_config_file(config_path, extension)
        for error in config.errors:
            click.echo(error, err=True)

        content = render(config, extension, filename, trace=_debug_echo if debug else None)
        write_target(filename, content)
