"""Command-line driver exercising the client against the live API."""

from __future__ import annotations

import json
import logging
from typing import Any

import typer

from .client import NexusClient
from .config import ClientConfig
from .models import JsonResult
from .observers import LoggingBackoffObserver

logger = logging.getLogger("nexus_sdk.cli")

app = typer.Typer(name="nexus-sdk", help="Query the Nexus Mods API from the command line.")


def _build_client(api_key: str, timeout: int) -> NexusClient:
    config = ClientConfig(api_key=api_key, timeout_seconds=timeout)
    return NexusClient(config, observer=LoggingBackoffObserver(logger))


def _echo_json(document: Any) -> None:
    typer.echo(json.dumps(document, indent=2, ensure_ascii=False))


def _echo_result(result: JsonResult) -> None:
    _echo_json(result.document())
    if not result.ok:
        raise typer.Exit(code=1)


@app.command()
def latest(
    game: str = typer.Argument(..., help="Game domain name, e.g. skyrimspecialedition."),
    api_key: str = typer.Option(..., "--api-key", envvar="NEXUS_API_KEY", help="Personal API key."),
    timeout: int = typer.Option(30, "--timeout", help="Per-request timeout in seconds."),
) -> None:
    """Show the latest added mods and the files of the newest one."""
    with _build_client(api_key, timeout) as client:
        result = client.get_latest_added(game)
        if not result.ok:
            typer.echo(f"Failed to get latest added mods for game {game}: {result.error.message}", err=True)
            raise typer.Exit(code=2)

        mods = result.data
        typer.echo(f"Latest added for {game}:")
        _echo_json(mods)

        if not (isinstance(mods, list) and mods and isinstance(mods[0], dict) and "mod_id" in mods[0]):
            return

        mod_id = str(mods[0]["mod_id"])
        typer.echo(f"Fetching files for mod_id={mod_id}")
        files = client.list_mod_files(game, mod_id)
        if files.ok:
            _echo_json(files.data)
        else:
            typer.echo(f"Failed to get files for mod {mod_id}: {files.error.message}", err=True)


@app.command()
def mod(
    game: str = typer.Argument(...),
    mod_id: str = typer.Argument(...),
    api_key: str = typer.Option(..., "--api-key", envvar="NEXUS_API_KEY"),
    timeout: int = typer.Option(30, "--timeout"),
) -> None:
    """Show a single mod."""
    with _build_client(api_key, timeout) as client:
        _echo_result(client.get_mod(game, mod_id))


@app.command()
def game(
    game: str = typer.Argument(...),
    api_key: str = typer.Option(..., "--api-key", envvar="NEXUS_API_KEY"),
    timeout: int = typer.Option(30, "--timeout"),
) -> None:
    """Show game information."""
    with _build_client(api_key, timeout) as client:
        _echo_result(client.get_game(game))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    app()


__all__ = ["app", "main"]
