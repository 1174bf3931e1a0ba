"""
tableau/writer.py — interfejsy zapisu wyrażeń i tableau.

Implementacje:
  LatexExpressionWriter, LatexTableauWriter  (tableau/latex.py)
  TreeTableauWriter                          (tableau/tree.py)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from formula import Expression

from .types import Tableau


@runtime_checkable
class ExpressionWriter(Protocol):
    def write_expression(self, expr: Expression) -> None: ...


@runtime_checkable
class TableauWriter(Protocol):
    def write_tableau(self, tableau: Tableau) -> None: ...
