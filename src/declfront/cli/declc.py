"""
declc - Declaration Front End Command-Line Interface
====================================================

Parses one declaration and prints its AST.

Usage Examples
--------------
Parse a file:
    $ declc decl.txt

Parse inline source:
    $ declc -e "int y = 7;"

Show tokens instead of the AST:
    $ declc --tokens -e "int y = 7;"

Run the built-in demo (int x = 42;):
    $ declc
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from declfront import __version__
from declfront.cli.errors import ExitCode, handle_cli_exception
from declfront.frontend import DEMO_SOURCE, Frontend, FrontendOptions
from declfront.lexer import Lexer


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


@click.command()
@click.argument(
    "source_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-e", "--source",
    "source_text",
    help="Parse this text instead of a file",
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print the token stream and exit",
)
@click.option(
    "--symbols",
    is_flag=True,
    help="Print the symbol table after parsing",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Base indentation of the AST dump",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging)",
)
@click.version_option(version=__version__, prog_name="declc")
def main(
    source_file: Optional[Path],
    source_text: Optional[str],
    tokens: bool,
    symbols: bool,
    indent: int,
    verbose: bool,
) -> None:
    """
    Parse one declaration of the form: int NAME = NUMBER;

    SOURCE_FILE is the file to read. With neither SOURCE_FILE nor
    --source, the demo declaration "int x = 42;" is parsed.

    \b
    Examples:
        declc decl.txt               # Parse a file
        declc -e "int y = 7;"        # Parse inline text
        declc --tokens decl.txt      # Dump tokens
        declc --symbols decl.txt     # Also print declared names
    """
    setup_logging(verbose)

    try:
        if source_file is not None and source_text is not None:
            raise click.BadParameter("give either SOURCE_FILE or --source, not both")

        if source_file is not None:
            source = source_file.read_text(encoding="utf-8")
            filename = str(source_file)
        elif source_text is not None:
            source, filename = source_text, "<source>"
        else:
            source, filename = DEMO_SOURCE, "<demo>"

        if tokens:
            for token in Lexer(source, filename).tokenize():
                click.echo(f"{token.kind.name:<10} {token.text!r:<12} {token.line}:{token.column}")
            return

        frontend = Frontend(FrontendOptions(render_indent=indent))
        result = frontend.compile_source(source, filename)

        if not result.success:
            click.echo(str(result.error), err=True)
            sys.exit(ExitCode.BUILD_ERROR)

        click.echo(result.ast_dump)

        if symbols:
            for name, type_name in result.symbols.items():
                click.echo(f"{name}: {type_name}")

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
