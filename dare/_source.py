"""Wczytywanie wyrażenia: argument → plik (--path) → stdin."""

from __future__ import annotations

import pathlib
import sys

from rich.console import Console
from rich.markup import escape

from formula import ParseError

from dare._config import get_settings

console = Console(width=get_settings().console_width)


def read_source(source: str | None, path: str | None) -> str:
    if source is not None:
        return source
    if path is not None:
        return pathlib.Path(path).read_text(encoding="utf-8")
    return sys.stdin.read()


def load_source(source: str | None, path: str | None) -> str:
    """Jak read_source(), ale błąd odczytu kończy program (SystemExit(1))."""
    try:
        return read_source(source, path)
    except OSError as e:
        console.print(f"[red]Błąd odczytu wyrażenia:[/red] {escape(str(e))}")
        raise SystemExit(1)


def show_parse_error(source: str, error: ParseError) -> None:
    """Wyświetla błąd parsowania z podkreśleniem miejsca w wyrażeniu."""
    console.print(f"[red]Błąd parsowania[/red] [dim]({error.code})[/dim]: {escape(str(error))}")
    console.print(error.excerpt(source.rstrip("\n")), markup=False, highlight=False)
