"""CLI for dirsum."""

import logging
import os
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from .config import load_config, resolve_algorithm
from .constants import DEFAULT_ALGORITHM
from .errors import ConfigError, PathUnreadableError, UnsupportedAlgorithmError
from .hashing import available_algorithms, compute_tree_digest
from .tree import iter_relative_files


app = typer.Typer(help="""\
File-system utilities applying from the current directory: list files
and compute a digest over their contents.""")

# Results go to stdout verbatim; rich styling is only used for errors
console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

ROOT_OPTION = typer.Option(
    None, "--root", "-r", help="Directory to scan (default: current directory)"
)


def _resolve_root(root: Optional[Path]) -> Path:
    return root if root is not None else Path.cwd()


def _fail(e: Exception) -> NoReturn:
    err_console.print(f"[red]error:[/red] {escape(str(e))}")
    raise typer.Exit(1)


def _emit(line: str) -> None:
    console.print(line, markup=False)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """File-system utilities applying from the current directory."""
    if verbose or os.environ.get("DEBUG"):
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@app.command("list")
def list_files(root: Optional[Path] = ROOT_OPTION):
    """List files present in current dir and its sub-directories."""
    try:
        for rel in iter_relative_files(_resolve_root(root)):
            _emit(rel)
    except PathUnreadableError as e:
        _fail(e)


@app.command()
def md5(root: Optional[Path] = ROOT_OPTION):
    """Compute a MD5 digest of all files present in current dir and its sub-directories."""
    try:
        result = compute_tree_digest(_resolve_root(root), DEFAULT_ALGORITHM)
    except (PathUnreadableError, UnsupportedAlgorithmError) as e:
        _fail(e)
    _emit(result.hexdigest)


@app.command()
def checksum(
    root: Optional[Path] = ROOT_OPTION,
    algorithm: Optional[str] = typer.Option(
        None, "--algorithm", "-a", help="Digest name, e.g. md5, sha256 (default: md5)"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML configuration file"
    ),
):
    """Compute a digest of all files present in current dir and its sub-directories."""
    try:
        cfg = load_config(config)
        name = resolve_algorithm(algorithm, cfg)
        result = compute_tree_digest(_resolve_root(root), name, cfg.chunk_size)
    except (ConfigError, PathUnreadableError, UnsupportedAlgorithmError) as e:
        _fail(e)
    _emit(result.hexdigest)


@app.command()
def algorithms():
    """List digest algorithms accepted by the checksum command."""
    for name in available_algorithms():
        _emit(name)


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
