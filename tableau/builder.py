"""
tableau/builder.py — budowa tableau semantycznego metodą reguł alfa/beta.

Reguły rozkładu (expr : oczekiwana wartość):
  stała, atom          liść z jednym oczekiwaniem
  (p)                  przezroczyste — rozkład p
  ¬p : v               alfa: p : ¬v
  p ∧ q : T            alfa: p : T, q : T
  p ∧ q : F            beta: p : F | q : F
  p ∨ q : T            beta: p : T | q : T
  p ∨ q : F            alfa: p : F, q : F
  p → q : T            beta: p : F | q : T
  p → q : F            alfa: p : T, q : F
  p ↔ q : T            beta: (p : T, q : T) | (p : F, q : F)
  p ↔ q : F            beta: (p : T, q : F) | (p : F, q : T)
  p ⊕ q : v            jak p ↔ q : ¬v

Każdy krok rozkładu dostaje nowe id (pre-order, od lewej), a gałęzie
z niego powstałe są oznaczone tym id. Budowa jest totalna — każde
poprawne wyrażenie daje tableau. Każda reguła beta podwaja liczbę liści;
przy k zagnieżdżonych regułach beta tableau może mieć 2^k liści.
"""

from __future__ import annotations

import itertools

from formula import (
    Atomic,
    Binary,
    BinaryOperatorKind,
    Expression,
    Paren,
    TruthValue,
    Unary,
    UnaryOperatorKind,
)

from .types import Expectation, Tableau, TableauBranch


class TableauBuilder:
    """
    Buduje tableau dla wyrażenia i oczekiwanej wartości logicznej.

    Licznik id jest prywatny dla instancji — jedna instancja odpowiada
    jednej budowie (patrz build()).

    Użycie::

        tableau = TableauBuilder().build(parse("A -> B"), True)
        tableau.width()   # 2
    """

    def __init__(self) -> None:
        self._ids = itertools.count()

    def next_id(self) -> int:
        return next(self._ids)

    # ------------------------------------------------------------------
    # Pomocnicze konstruktory
    # ------------------------------------------------------------------

    def _leaf(self, expr: Expression, expect: bool) -> Tableau:
        return Tableau(expectations=[Expectation(expr, expect, self.next_id())])

    @staticmethod
    def _node(expectation: Expectation, *branches: Tableau) -> Tableau:
        return Tableau(
            expectations=[expectation],
            branches=[TableauBranch(b, expectation.id) for b in branches],
        )

    def _both(self, lhs: Expression, lhs_expect: bool, rhs: Expression, rhs_expect: bool) -> Tableau:
        """Reguła alfa: lhs i rhs muszą zachodzić na każdej ścieżce."""
        tableau = self.build(lhs, lhs_expect)
        tableau.append(self.build(rhs, rhs_expect))
        return tableau

    # ------------------------------------------------------------------
    # Reguły dla operatorów
    # ------------------------------------------------------------------

    def build_unary(self, expr: Unary, expect: bool) -> Tableau:
        expectation = Expectation(expr, expect, self.next_id())
        match expr.operator.kind:
            case UnaryOperatorKind.NEGATION:
                return self._node(expectation, self.build(expr.operand, not expect))

    def build_conjunction(self, expr: Binary, expect: bool) -> Tableau:
        expectation = Expectation(expr, expect, self.next_id())
        if expect:
            return self._node(expectation, self._both(expr.lhs, True, expr.rhs, True))
        return self._node(
            expectation,
            self.build(expr.lhs, False),
            self.build(expr.rhs, False),
        )

    def build_disjunction(self, expr: Binary, expect: bool) -> Tableau:
        expectation = Expectation(expr, expect, self.next_id())
        if expect:
            return self._node(
                expectation,
                self.build(expr.lhs, True),
                self.build(expr.rhs, True),
            )
        return self._node(expectation, self._both(expr.lhs, False, expr.rhs, False))

    def build_implication(self, expr: Binary, expect: bool) -> Tableau:
        expectation = Expectation(expr, expect, self.next_id())
        if expect:
            return self._node(
                expectation,
                self.build(expr.lhs, False),
                self.build(expr.rhs, True),
            )
        return self._node(expectation, self._both(expr.lhs, True, expr.rhs, False))

    def build_equivalence(self, expr: Binary, expect: bool, label: bool | None = None) -> Tableau:
        """
        Rozkład równoważności. `label` to wartość zapisywana w oczekiwaniu
        węzła — dla ⊕ jest to wartość samego ⊕, a nie zanegowanej równoważności.
        """
        expectation = Expectation(expr, expect if label is None else label, self.next_id())
        return self._node(
            expectation,
            self._both(expr.lhs, True, expr.rhs, expect),
            self._both(expr.lhs, False, expr.rhs, not expect),
        )

    def build_exclusive(self, expr: Binary, expect: bool) -> Tableau:
        return self.build_equivalence(expr, not expect, label=expect)

    def build_binary(self, expr: Binary, expect: bool) -> Tableau:
        match expr.operator.kind:
            case BinaryOperatorKind.CONJUNCTION:
                return self.build_conjunction(expr, expect)
            case BinaryOperatorKind.DISJUNCTION:
                return self.build_disjunction(expr, expect)
            case BinaryOperatorKind.EXCLUSIVE_DISJUNCTION:
                return self.build_exclusive(expr, expect)
            case BinaryOperatorKind.IMPLICATION:
                return self.build_implication(expr, expect)
            case BinaryOperatorKind.EQUIVALENCE:
                return self.build_equivalence(expr, expect)

    # ------------------------------------------------------------------

    def build(self, expr: Expression, expect: bool) -> Tableau:
        """Buduje tableau dla `expr : expect`."""
        match expr:
            case TruthValue() | Atomic():
                return self._leaf(expr, expect)
            case Paren(inner=inner):
                return self.build(inner, expect)
            case Unary():
                return self.build_unary(expr, expect)
            case Binary():
                return self.build_binary(expr, expect)
        raise TypeError(f"Nieznany węzeł wyrażenia: {expr!r}")


def build(expr: Expression, expect: bool) -> Tableau:
    """Buduje tableau nowym builderem (id liczone od 0)."""
    return TableauBuilder().build(expr, expect)
