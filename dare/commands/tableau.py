"""Komenda: dare tableau — wypisuje tableau semantyczne wyrażenia."""

from __future__ import annotations

import argparse
import sys

from rich.console import Console

from formula import ParseError
from tableau import LatexTableauWriter, Tableau, TreeTableauWriter

from dare._config import get_settings
from dare._source import load_source, show_parse_error

console = Console(width=get_settings().console_width)

FORMATS = ("tree", "latex")


def _print_latex(tableau: Tableau, show_ids: bool) -> None:
    writer = LatexTableauWriter(show_ids=show_ids)
    writer.write_tableau(tableau)
    sys.stdout.write(writer.finalize() + "\n")
    sys.stdout.flush()


def _print_tree(tableau: Tableau, show_ids: bool) -> None:
    writer = TreeTableauWriter(show_ids=show_ids)
    writer.write_tableau(tableau)
    console.print(writer.finalize())


def run(args: argparse.Namespace) -> None:
    source = load_source(args.source, args.path)

    try:
        tableau = Tableau.parse(source, not args.expect_false)
    except ParseError as e:
        show_parse_error(source, e)
        raise SystemExit(1)

    match args.format:
        case "latex":
            _print_latex(tableau, args.show_ids)
        case _:
            _print_tree(tableau, args.show_ids)
            console.print(f"  [dim]{tableau.width()} gałęzi końcowych[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "tableau",
        help="Wypisuje tableau semantyczne wyrażenia (drzewo lub LaTeX).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Buduje tableau semantyczne dla wyrażenia z oczekiwaną wartością T
(lub F z --false) i wypisuje je jako drzewo w terminalu albo jako
środowisko picture LaTeX.

W drzewie gałąź zamknięta (sprzeczna) oznaczona jest ✗, otwarty liść ○.

Przykłady:
  dare tableau tree "A & (B | ~A)"
  dare tableau latex --false "A -> A"
  dare tableau tree --show-ids --path formula.txt
        """,
    )
    p.add_argument(
        "format",
        choices=FORMATS,
        help="Format wyjścia: tree (terminal) lub latex.",
    )
    p.add_argument(
        "source",
        nargs="?",
        metavar="WYRAŻENIE",
        help="Wyrażenie logiczne (domyślnie: z --path albo stdin).",
    )
    p.add_argument(
        "--false", "-f",
        action="store_true",
        dest="expect_false",
        help="Buduj tableau dla oczekiwanej wartości F.",
    )
    p.add_argument(
        "--show-ids", "-s",
        action="store_true",
        dest="show_ids",
        help="Pokaż id każdego oczekiwania.",
    )
    p.add_argument(
        "--path", "-p",
        metavar="PLIK",
        help="Wczytaj wyrażenie z pliku, gdy nie podano go jako argumentu.",
    )
    p.set_defaults(func=run)
