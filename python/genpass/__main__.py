"""
CLI interface for genpass password generator.
"""

import sys
from typing import Tuple

import click

from .config import DEFAULT_LENGTH, GeneratorConfig
from .exceptions import GenpassException
from .utils.logs import configure_logging
from .utils.output import emit_password
from .utils.password_generator import PasswordGenerator


def _disabled_groups(no_latin_upper: bool, no_latin_lower: bool, no_latin: bool,
                     no_digits: bool, no_special: bool) -> Tuple[str, ...]:
    flags = (
        ("latin-upper", no_latin_upper),
        ("latin-lower", no_latin_lower),
        ("latin", no_latin),
        ("digits", no_digits),
        ("special", no_special),
    )
    return tuple(name for name, disabled in flags if disabled)


@click.command()
@click.argument("length", default=DEFAULT_LENGTH, type=int)
@click.option("--no-latin-upper", is_flag=True, help="Turn off latin uppercase symbols")
@click.option("--no-latin-lower", is_flag=True, help="Turn off latin lowercase symbols")
@click.option("--no-latin", is_flag=True, help="Turn off all latin symbols")
@click.option("--no-digits", is_flag=True, help="Turn off digits")
@click.option("--no-special", is_flag=True, help="Turn off special symbols")
@click.option(
    "--allow",
    "-a",
    "allowed",
    multiple=True,
    help="Allow additional symbols (can be repeated)",
)
@click.option(
    "--deny",
    "-d",
    "denied",
    multiple=True,
    help="Deny symbols (can be repeated, takes precedence over allowed symbols)",
)
@click.option(
    "--copy",
    "-c",
    is_flag=True,
    help="Copy the password to the clipboard instead of printing it",
)
@click.option("--verbose", "-v", is_flag=True, help="Be verbose")
@click.version_option(package_name="genpass")
def cli(length: int, no_latin_upper: bool, no_latin_lower: bool, no_latin: bool,
        no_digits: bool, no_special: bool, allowed: Tuple[str, ...],
        denied: Tuple[str, ...], copy: bool, verbose: bool) -> None:
    """Generate a random password of LENGTH symbols (default: 24)."""
    try:
        config = GeneratorConfig(
            length=length,
            disabled_groups=frozenset(_disabled_groups(
                no_latin_upper, no_latin_lower, no_latin, no_digits, no_special
            )),
            allow=allowed,
            deny=denied,
            copy_to_clipboard=copy,
            verbose=verbose,
        )
        configure_logging(config.verbose)

        generator = PasswordGenerator(config)
        password = generator.generate()
        emit_password(password, config.copy_to_clipboard)
        del password
    except GenpassException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
