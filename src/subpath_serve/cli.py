"""CLI interface for subpath-serve.

Starts the HTTP server for a folder. Accepts both the classic single-dash
flags (``-port``, ``-folder``, ``-git-http-prefix``) and their double-dash
spellings.
"""

import logging
import sys
from pathlib import Path

import click

from subpath_serve.config import Config


@click.command()
@click.option(
    "-port",
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to serve on (default: 8050)",
)
@click.option(
    "-folder",
    "--folder",
    "-f",
    type=click.Path(path_type=Path),
    default=None,
    help="Folder to serve files from (default: ./serve)",
)
@click.option(
    "-git-http-prefix",
    "--git-http-prefix",
    default=None,
    help=(
        "Prefix which, with the matched file path appended, links to a git web view "
        "(e.g. https://github.com/user/dotfiles/blob/master)"
    ),
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--ignore",
    "-i",
    multiple=True,
    help="Name of a file or directory to leave out of the walk, repeatable (default: .git)",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Path to configuration file (default: auto-discover subpath-serve.toml)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every resolution)",
)
def cli(
    port: int | None,
    folder: Path | None,
    git_http_prefix: str | None,
    host: str | None,
    ignore: tuple[str, ...],
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Serve files from a folder, matching requests by path suffix.

    For instructions, see https://github.com/seanbreckenridge/subpath-serve
    """
    from subpath_serve.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = (
            Config.load(config_path)
            .with_overrides(
                host=host,
                port=port,
                folder=folder,
                git_http_prefix=git_http_prefix,
                ignore=ignore or None,
            )
            .validate()
        )
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(f"subpath-serve serving {config.serve.folder} on {config.server.host}:{config.server.port}")
    if config.serve.git_http_prefix:
        click.echo(f"Repository prefix: {config.serve.git_http_prefix}")
    else:
        click.echo("Repository links: disabled (no git-http-prefix)")
    if config.config_path:
        click.echo(f"Config file: {config.config_path}")

    run_server(config)
