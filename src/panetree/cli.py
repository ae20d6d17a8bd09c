"""panetree command line

`panetree serve` runs the daemon that owns the topology store; the other
commands are thin HTTP clients meant to be bound to multiplexer keys.
"""

import os
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.tree import Tree

from . import config

app = typer.Typer(help="Split-tree pane topology for WezTerm and tmux")
console = Console()


def _default_pane() -> Optional[str]:
    """Pane the key binding fired in, from the multiplexer's environment."""
    return os.environ.get("WEZTERM_PANE") or os.environ.get("TMUX_PANE") or None


def _base_url() -> str:
    return f"http://{config.SERVER_HOST}:{config.SERVER_PORT}"


def _request(method: str, path: str, payload: Optional[dict] = None) -> dict:
    try:
        with httpx.Client(base_url=_base_url(), timeout=config.CLIENT_TIMEOUT) as client:
            response = client.request(method, path, json=payload)
            response.raise_for_status()
            return response.json()
    except httpx.ConnectError:
        console.print(f"[red]panetree daemon is not running at {_base_url()}[/red]")
        console.print("Start it with: [cyan]panetree serve[/cyan]")
        raise typer.Exit(1)
    except httpx.HTTPStatusError as e:
        console.print(f"[red]Daemon error {e.response.status_code}: {e.response.text}[/red]")
        raise typer.Exit(1)


def _report(result: dict) -> None:
    if result.get("success"):
        console.print(f"[green]{result.get('message', 'ok')}[/green]")
    else:
        console.print(f"[red]{result.get('message', 'failed')}[/red]")
        raise typer.Exit(1)


@app.command()
def serve(
    adapter: str = typer.Option(config.TERMINAL_ADAPTER, help="auto, wezterm or tmux"),
    host: str = typer.Option(config.SERVER_HOST, help="Address to listen on"),
    port: int = typer.Option(config.SERVER_PORT, help="Port to listen on"),
):
    """Run the panetree daemon."""
    from .web.app import main

    main(adapter_type=adapter, host=host, port=port)


@app.command()
def split(
    direction: str = typer.Argument(..., help="Left, Right, Up or Down"),
    percent: Optional[int] = typer.Option(None, "--percent", "-p", help="Size of the new pane in percent"),
    cells: Optional[int] = typer.Option(None, "--cells", "-c", help="Size of the new pane in cells"),
    pane: Optional[str] = typer.Option(None, "--pane", help="Pane to split (default: current)"),
):
    """Split a pane."""
    _report(_request("POST", "/api/split", {
        "pane_id": pane or _default_pane(),
        "direction": direction,
        "percent": percent,
        "cells": cells,
    }))


@app.command()
def close(
    confirm: bool = typer.Option(True, "--confirm/--no-confirm", help="Ask before closing"),
    pane: Optional[str] = typer.Option(None, "--pane", help="Pane to close (default: current)"),
):
    """Close a pane and repair the split tree."""
    _report(_request("POST", "/api/close", {"pane_id": pane or _default_pane(), "confirm": confirm}))


@app.command()
def equalize(
    pane: Optional[str] = typer.Option(None, "--pane", help="Any pane of the tab (default: current)"),
):
    """Give every column of the tab the same width."""
    _report(_request("POST", "/api/equalize", {"pane_id": pane or _default_pane()}))


@app.command()
def reload():
    """Resync the daemon with the live layout (after a config reload)."""
    _report(_request("POST", "/api/reload"))


@app.command()
def show():
    """Show the split tree of every tab."""
    topology = _request("GET", "/api/topology")
    if not topology:
        console.print("[yellow]No panes recorded[/yellow]")
        return
    console.print(build_tree(topology))


def build_tree(topology: dict) -> Tree:
    """Render {window: {tab: {pane: record}}} as a rich Tree."""
    root = Tree("[bold]panetree[/bold]")
    for window_id, tabs in topology.items():
        window_node = root.add(f"[cyan]window {window_id}[/cyan]")
        for tab_id, panes in tabs.items():
            tab_node = window_node.add(f"[blue]tab {tab_id}[/blue]")
            for pane_id, record in panes.items():
                if record.get("parent") is None or record["parent"] not in panes:
                    _add_pane(tab_node, pane_id, panes, direction=None)
    return root


def _add_pane(parent: Tree, pane_id: str, panes: dict, direction: Optional[str]) -> None:
    record = panes[pane_id]
    edges = f"v={record.get('vsplitedge') or '-'} h={record.get('hsplitedge') or '-'}"
    label = f"pane {pane_id} [dim]{edges}[/dim]"
    if direction:
        label = f"[magenta]{direction}[/magenta] {label}"
    node = parent.add(label)
    for child_id, child_direction in zip(record.get("children", []), record.get("directions", [])):
        if child_id in panes:
            _add_pane(node, child_id, panes, child_direction)


if __name__ == "__main__":
    app()
