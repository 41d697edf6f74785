"""Command-line entry point for the prompt engine demo."""

from __future__ import annotations

from pathlib import Path

import click

from .app import DemoCLI, RunConfiguration, main as _app_main


@click.command()
@click.option(
    "--directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory offered by the JSON file-selection prompt.",
)
@click.option("--wrap-width", type=click.IntRange(min=1), default=None, help="Line width used for the variant list.")
@click.option("--log-dir", type=str, default="./log", show_default=True, help="Directory receiving app.log.")
@click.option("--no-banner", is_flag=True, default=False, help="Skip the start-up banner.")
def main(
    directory: Path | None,
    wrap_width: int | None,
    log_dir: str,
    no_banner: bool,
) -> None:
    """Run the interactive prompt demo."""

    configuration = RunConfiguration(
        directory=directory,
        wrap_width=wrap_width,
        log_dir=log_dir,
        show_banner=not no_banner,
    )
    _app_main(config=configuration)


__all__ = ["DemoCLI", "RunConfiguration", "main"]
