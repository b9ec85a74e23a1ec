from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from .version import __version__
from .utils.logging import setup_logger
from .pipeline import RunConfig, run
from .reflow.literal import check_encoding
from .reflow.reflower import DEFAULT_MAX_WIDTH, DEFAULT_MIN_WIDTH


app = typer.Typer(add_completion=False, help="Reflow plain text paragraphs to comfortable line lengths.")


@app.command()
def main(
    input: Optional[Path] = typer.Option(
        None, "-i", "--input", exists=True, dir_okay=False, help="Input text file (default stdin)"
    ),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Output file path (default stdout)"),
    min_width: int = typer.Option(
        DEFAULT_MIN_WIDTH, "--min-width", min=0, envvar="FORMATE_MIN_WIDTH", help="Join lines shorter than this"
    ),
    max_width: int = typer.Option(
        DEFAULT_MAX_WIDTH, "--max-width", min=0, envvar="FORMATE_MAX_WIDTH", help="Split lines longer than this"
    ),
    encoding: str = typer.Option("utf-8", "--encoding", envvar="FORMATE_ENCODING", help="Text encoding"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
    version: bool = typer.Option(False, "--version", help="Print version and exit"),
):
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if min_width > max_width:
        raise typer.BadParameter(
            f"--min-width ({min_width}) must not exceed --max-width ({max_width})", param_hint="--min-width"
        )

    try:
        check_encoding(encoding)
    except LookupError:
        raise typer.BadParameter(f"unknown encoding: {encoding}", param_hint="--encoding")
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--encoding")

    setup_logger(log_level)
    cfg = RunConfig(
        input=input,
        output=output,
        min_width=min_width,
        max_width=max_width,
        encoding=encoding,
        log_level=log_level,
    )
    run(cfg)


def entrypoint():
    # .env values must be in the environment before typer resolves envvars
    load_dotenv()
    app()

if __name__ == "__main__":
    entrypoint()
