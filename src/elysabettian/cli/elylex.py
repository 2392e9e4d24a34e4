"""
elylex - Scanner Token Dump
===========================

This module implements a command-line front end for the Elysabettian
scanner. It reads a source file, scans it and prints the resulting token
stream, which is handy when debugging the scanner or a parser fed by it.

Usage Examples
--------------
Dump tokens as text:
    $ elylex hello.ely

Dump tokens as JSON:
    $ elylex --format json hello.ely

Fail on the first lexical error:
    $ elylex --strict hello.ely

Verbose mode:
    $ elylex -v hello.ely
"""

import json
import logging
from pathlib import Path

import click

from elysabettian import __version__
from elysabettian.cli.errors import handle_cli_exception
from elysabettian.language.scanner import check_tokens, scan
from elysabettian.language.tokens import Token

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_token(token: Token) -> str:
    """Format a token as one line of the text dump."""
    return f"{token.line:4d} {token.type.name:<16} {token.text!r}"


def tokens_to_json(tokens: list[Token]) -> str:
    """Serialize tokens as a JSON array of {type, text, line} objects."""
    return json.dumps(
        [
            {"type": token.type.name, "text": token.text, "line": token.line}
            for token in tokens
        ],
        indent=2,
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "source_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format for the token dump",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Report the first lexical error and exit with a non-zero status",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="elylex")
def main(
    source_file: Path,
    output_format: str,
    strict: bool,
    verbose: bool,
) -> None:
    """
    Scan Elysabettian source code and print its tokens.

    SOURCE_FILE is the source file to scan.

    \b
    Examples:
        elylex hello.ely                 # One token per line
        elylex -f json hello.ely         # JSON array of tokens
        elylex --strict hello.ely        # Fail on lexical errors

    \b
    Text output columns:
        line  token type  lexeme (or error message)
    """
    setup_logging(verbose)

    try:
        logger.debug(f"Reading {source_file}")
        # Bytes keep \r characters exactly as they are in the file
        source = source_file.read_bytes().decode("utf-8")

        tokens = scan(source, str(source_file))
        if strict:
            check_tokens(tokens, source, str(source_file))

        if output_format.lower() == "json":
            click.echo(tokens_to_json(tokens))
        else:
            for token in tokens:
                click.echo(format_token(token))

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
