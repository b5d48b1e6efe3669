# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
from typing import Optional

import typer

from ..diagnostics import get_error_string, reset_error
from ..services import (
    calculate_directory_size,
    dir_iter_start,
    exists,
    expand_user,
    get_file_size,
    is_directory,
    is_file,
    is_readable,
    is_readable_and_writable,
    is_writable,
    join_path,
    mkdir as make_directory,
    to_native_path,
)

from ..logging_config import setup_logging

setup_logging()

app = typer.Typer(help="portafs CLI - inspect directories through the portable filesystem layer")

logger = logging.getLogger(__name__)

PREDICATES = (
    ("exists", exists),
    ("is_directory", is_directory),
    ("is_file", is_file),
    ("is_readable", is_readable),
    ("is_writable", is_writable),
    ("is_readable_and_writable", is_readable_and_writable),
)


def _verbose(verbose: bool) -> None:
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")


def _expand(path: str) -> str:
    expanded = expand_user(path)
    if expanded is None:
        raise typer.BadParameter(f"Cannot resolve home directory for {path}")
    return expanded


@app.command()
def ls(
    path: str = typer.Argument(".", help="Directory to list"),
    all_entries: bool = typer.Option(False, "--all", "-a", help="Include '.' and '..'"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    List the entries of a directory in native order.
    """
    _verbose(verbose)
    reset_error()
    iterator = dir_iter_start(_expand(path))
    if iterator is None:
        typer.echo(get_error_string() or f"Cannot list {path}", err=True)
        raise typer.Exit(code=1)

    with iterator:
        for name in iterator:
            if not all_entries and name in (".", ".."):
                continue
            typer.echo(name)
        if iterator.error is not None:
            typer.echo(get_error_string(), err=True)
            raise typer.Exit(code=1)


@app.command()
def du(
    path: str = typer.Argument(".", help="Directory whose direct children are summed"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Print the total size of the regular files directly inside a directory.
    """
    _verbose(verbose)
    target = _expand(path)
    if not is_directory(target):
        typer.echo(f"Path is not a directory: {target}", err=True)
        raise typer.Exit(code=1)
    size = calculate_directory_size(target)
    typer.echo(f"{size}\t{target}")


@app.command()
def stat(
    path: str = typer.Argument(..., help="Path to inspect"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Show every predicate for a path, plus its size when it is a file.
    """
    _verbose(verbose)
    target = _expand(path)
    for name, predicate in PREDICATES:
        typer.echo(f"{name}: {str(predicate(target)).lower()}")
    if is_file(target):
        typer.echo(f"size: {get_file_size(target)}")


@app.command(name="mkdir")
def mkdir_cmd(
    path: str = typer.Argument(..., help="Absolute directory path ('~' is expanded)"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Create a single directory. An existing directory is not an error.
    """
    _verbose(verbose)
    target = _expand(path)
    if not make_directory(target):
        typer.echo(f"Cannot create directory {target}", err=True)
        raise typer.Exit(code=1)
    typer.echo(target)


@app.command()
def join(
    left: str = typer.Argument(...),
    right: str = typer.Argument(...),
    native: bool = typer.Option(False, "--native", help="Convert '/' to the native delimiter"),
):
    """
    Join two path fragments with the native delimiter.
    """
    joined: Optional[str] = join_path(left, right)
    if joined is not None and native:
        joined = to_native_path(joined)
    if joined is None:
        raise typer.Exit(code=1)
    typer.echo(joined)
