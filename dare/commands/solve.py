"""Komenda: dare solve — minimalne wartościowania spełniające wyrażenie."""

from __future__ import annotations

import argparse
import json
import sys

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from formula import ParseError, parse, variables
from tableau import Solutions, build

from dare._config import get_settings
from dare._source import load_source, show_parse_error

console = Console(width=get_settings().console_width)


# ---------------------------------------------------------------------------
# Wyświetlanie wyników
# ---------------------------------------------------------------------------

def _show_solutions(solutions: Solutions, names: list[str]) -> None:
    if not solutions:
        console.print("[yellow]Brak rozwiązań.[/yellow]")
        return

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("#", style="dim", no_wrap=True)
    for name in names:
        table.add_column(name, no_wrap=True, justify="center")

    for i, solution in enumerate(solutions):
        row: list[Text | str] = [str(i)]
        for name in names:
            value = solution.get(name)
            if value is None:
                row.append(Text("·", style="dim"))
            else:
                row.append(Text("T" if value else "F", style="green" if value else "red"))
        table.add_row(*row)

    console.print(table)
    total = len(solutions)
    _pl = "rozwiązanie" if total == 1 else ("rozwiązania" if 2 <= total % 10 <= 4 and total % 100 not in range(11, 15) else "rozwiązań")
    console.print(f"  [dim]{total} {_pl}[/dim]")


def _print_json(solutions: Solutions) -> None:
    output = json.dumps([s.as_dict() for s in solutions], ensure_ascii=False)
    sys.stdout.write(output + "\n")
    sys.stdout.flush()


# ---------------------------------------------------------------------------
# Główna logika
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    source = load_source(args.source, args.path)
    expect = not args.expect_false

    try:
        expr = parse(source)
    except ParseError as e:
        show_parse_error(source, e)
        raise SystemExit(1)

    tableau   = build(expr, expect)
    raw       = Solutions.from_tableau(tableau)
    solutions = raw.clean()

    if args.json:
        _print_json(solutions)
        return

    if args.verbose:
        console.print(
            f"[dim]tableau: {tableau.width()} liści, "
            f"{len(raw)} rozwiązań przed / {len(solutions)} po usunięciu nadmiarowych[/dim]"
        )

    console.print(
        f"Wyrażenie: [bold cyan]{expr}[/bold cyan]  "
        f"oczekiwana wartość: [bold]{'T' if expect else 'F'}[/bold]",
        highlight=False,
    )
    _show_solutions(solutions, variables(expr))


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "solve",
        help="Wyznacza minimalne wartościowania, przy których wyrażenie ma daną wartość.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Buduje tableau semantyczne dla wyrażenia i wypisuje minimalne częściowe
wartościowania zmiennych (zmienne nieujęte w rozwiązaniu mogą mieć dowolną
wartość). Brak rozwiązań oznacza, że wyrażenie nie może przyjąć oczekiwanej
wartości (sprzeczność dla T, tautologia dla --false).

Przykłady:
  dare solve "A -> B"
  dare solve --false "(A -> B) & A -> B"
  dare solve --path formula.txt --json
  echo "A <-> ~B" | dare solve
        """,
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
        help="Szukaj wartościowań, przy których wyrażenie jest fałszywe.",
    )
    p.add_argument(
        "--path", "-p",
        metavar="PLIK",
        help="Wczytaj wyrażenie z pliku, gdy nie podano go jako argumentu.",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Wypisz rozwiązania jako JSON, np. [{\"A\": false}, {\"B\": true}].",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Pokaż szerokość tableau i liczbę rozwiązań przed czyszczeniem.",
    )
    p.set_defaults(func=run)
