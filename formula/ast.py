"""
formula/ast.py — drzewo wyrażenia logiki zdań.

Węzły (niezmienne po zbudowaniu, dzieci należą wyłącznie do rodzica):
  TruthValue   stała 1 / 0
  Atomic       zmienna zdaniowa
  Paren        wyrażenie w nawiasach
  Unary        negacja
  Binary       ∧ ∨ ⊕ → ↔ (w dowolnym zapisie)

str(expr) odtwarza tekst wejściowy z dokładnością do białych znaków:
  atom → nazwa, stała → "1"/"0", negacja → operator + operand,
  binarne → "lhs op rhs", nawias → "(...)".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from .span import Span
from .tokens import BinaryOperator, UnaryOperator


@dataclass(frozen=True, slots=True)
class TruthValue:
    value: bool
    span:  Span

    def __str__(self) -> str:
        return "1" if self.value else "0"


@dataclass(frozen=True, slots=True)
class Atomic:
    name: str
    span: Span

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Paren:
    inner: Expression
    span:  Span

    def __str__(self) -> str:
        return f"({self.inner})"


@dataclass(frozen=True, slots=True)
class Unary:
    operator:      UnaryOperator
    operand:       Expression
    operator_span: Span
    span:          Span

    def __str__(self) -> str:
        return f"{self.operator}{self.operand}"


@dataclass(frozen=True, slots=True)
class Binary:
    lhs:           Expression
    operator:      BinaryOperator
    rhs:           Expression
    operator_span: Span
    span:          Span

    def __str__(self) -> str:
        return f"{self.lhs} {self.operator} {self.rhs}"


Expression: TypeAlias = TruthValue | Atomic | Paren | Unary | Binary


def variables(expr: Expression) -> list[str]:
    """Zwraca nazwy zmiennych zdaniowych w kolejności pierwszego wystąpienia (bez powtórzeń)."""
    seen: dict[str, None] = {}
    stack: list[Expression] = [expr]
    while stack:
        match stack.pop():
            case Atomic(name=name):
                seen.setdefault(name, None)
            case Paren(inner=inner):
                stack.append(inner)
            case Unary(operand=operand):
                stack.append(operand)
            case Binary(lhs=lhs, rhs=rhs):
                stack.append(rhs)
                stack.append(lhs)
            case TruthValue():
                pass
    return list(seen)
