# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason-simplelog

import sys
from typing import Annotated, Optional

import typer

from coreason_simplelog import __version__
from coreason_simplelog.builder import LoggerBuilder
from coreason_simplelog.exceptions import SimpleLogError
from coreason_simplelog.levels import Level
from coreason_simplelog.schemas import ColorPolicy, LogRecord, OutputStream
from coreason_simplelog.utils.logger import logger

app = typer.Typer(
    name="coreason-simplelog",
    help="CLI for coreason-simplelog: a plain console log sink.",
    add_completion=False,
)


@app.command()
def emit(
    message: Annotated[str, typer.Argument(help="Message to log")],
    level: Annotated[str, typer.Option("--level", "-l", help="Level of the record")] = "info",
    target: Annotated[str, typer.Option("--target", "-t", help="Target (module path) of the record")] = "main",
    log_level: Annotated[str, typer.Option("--log-level", help="Global threshold")] = "trace",
    colors: Annotated[bool, typer.Option("--colors/--no-colors", help="Color the level label")] = True,
    timestamps: Annotated[bool, typer.Option("--timestamps/--no-timestamps", help="Prefix a timestamp")] = True,
    threads: Annotated[bool, typer.Option("--threads", help="Include the thread name")] = False,
    stderr: Annotated[bool, typer.Option("--stderr", help="Write to stderr instead of stdout")] = False,
    local: Annotated[bool, typer.Option("--local", help="Use local time instead of UTC")] = False,
    fmt: Annotated[Optional[str], typer.Option("--format", "-f", help="strftime timestamp format")] = None,
    check_output_stream: Annotated[
        bool, typer.Option("--check-output-stream", help="Check the selected stream, not stdout, for colors")
    ] = False,
) -> None:
    """
    Register the console sink and emit one record through it.
    """
    try:
        record_level = Level.from_str(level)
        builder = (
            LoggerBuilder()
            .with_level(log_level)
            .with_colors(colors)
            .with_timestamps(timestamps)
            .with_timestamp_format(fmt)
            .with_threads(threads)
            .with_output_stream(OutputStream.STDERR if stderr else OutputStream.STDOUT)
            .with_color_policy(
                ColorPolicy.CHECK_OUTPUT_STREAM if check_output_stream else ColorPolicy.ALWAYS_CHECK_STDOUT
            )
        )
        if local:
            builder = builder.with_local_timezone()
        sink = builder.init()
    except SimpleLogError as e:
        logger.exception("Logger setup failed")
        typer.echo(f"Error: {e}", err=True)
        sys.exit(1)

    sink.log(LogRecord(level=record_level, target=target, message=message))


@app.command("check-level")
def check_level(
    name: Annotated[str, typer.Argument(help="Level name to parse")],
) -> None:
    """Parse a level name and print its canonical label."""
    try:
        typer.echo(Level.from_str(name).label)
    except SimpleLogError as e:
        typer.echo(f"Error: {e}", err=True)
        sys.exit(1)


@app.command()
def version() -> None:
    """Print the version of coreason-simplelog."""
    typer.echo(f"coreason-simplelog v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()  # pragma: no cover
