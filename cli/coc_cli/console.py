from __future__ import annotations

import json

from rich.console import Console
from rich.markup import escape

from coc_client import ApiError, TransportError

console = Console()


def print_json(data) -> None:
    if isinstance(data, str):
        console.print(data)
        return
    console.print_json(data=data)


def warn(msg: str) -> None:
    console.print(f"[bold yellow]WARN[/] {escape(msg)}")


def err(msg: str) -> None:
    console.print(f"[bold red]ERR[/] {escape(msg)}")


def request_failed(exc: TransportError) -> None:
    """Report a failed API call; for HTTP errors include the API's ``reason`` code."""
    if not isinstance(exc, ApiError):
        err(f"Request failed: {exc}")
        return
    reason = None
    if exc.details:
        try:
            reason = json.loads(exc.details).get("reason")
        except (ValueError, AttributeError):
            reason = None
    suffix = f" [{reason}]" if reason else ""
    err(f"HTTP {exc.status_code}{suffix}: {exc}")
