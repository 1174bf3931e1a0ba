"""
dare — narzędzie CLI dla tableau semantycznych logiki zdań.

Użycie:
  dare <komenda> [opcje]

Komendy:
  solve     Wypisuje minimalne wartościowania spełniające wyrażenie.
  tableau   Wypisuje tableau semantyczne wyrażenia (drzewo lub LaTeX).

Składnia wyrażeń:
  negacja ¬ ~ !   koniunkcja && ∧ & .   alternatywa || ∨ |
  xor ⊕ ⊻ ↮ ≢ + ^   implikacja -> → ⇒ ⊃   równoważność == <-> ↔ ⇔ ≡
  stałe 1 0, nawiasy ( )
"""

from __future__ import annotations

import argparse
import sys

# Operatory logiczne to znaki spoza ASCII; wymuszamy UTF-8 na stdout i stderr.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from dare._config import get_settings
from dare.commands import solve as cmd_solve
from dare.commands import tableau as cmd_tableau


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dare",
        description="dare — tableau semantyczne i minimalne rozwiązania dla logiki zdań.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="dare 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_solve.add_parser(subparsers)
    cmd_tableau.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    # Głęboko zagnieżdżone wyrażenia → głęboka rekurencja parsera i buildera.
    sys.setrecursionlimit(max(sys.getrecursionlimit(), get_settings().recursion_limit))

    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
