"""
formula/tokens.py — tokeny leksera i tablice operatorów.

TokenKind to jedna z wartości:
  Identifier(name)            nazwa zmiennej zdaniowej
  Delimiter.OPEN / CLOSE      nawiasy
  TruthLiteral(value)         stała logiczna 1 / 0
  UnaryOperator(kind, spelling)
  BinaryOperator(kind, spelling)

Operatory zachowują dosłowny zapis (spelling), dzięki czemu wyrażenie
wypisywane jest tymi samymi symbolami, którymi zostało wprowadzone.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

from .span import Span


# ---------------------------------------------------------------------------
# Operatory
# ---------------------------------------------------------------------------

class UnaryOperatorKind(StrEnum):
    NEGATION = "negation"


class BinaryOperatorKind(StrEnum):
    CONJUNCTION           = "conjunction"
    DISJUNCTION           = "disjunction"
    EXCLUSIVE_DISJUNCTION = "exclusive_disjunction"
    IMPLICATION           = "implication"
    EQUIVALENCE           = "equivalence"


# Niższa liczba = silniejsze wiązanie.
PRECEDENCE: dict[BinaryOperatorKind, int] = {
    BinaryOperatorKind.CONJUNCTION:           1,
    BinaryOperatorKind.DISJUNCTION:           2,
    BinaryOperatorKind.EXCLUSIVE_DISJUNCTION: 3,
    BinaryOperatorKind.IMPLICATION:           4,
    BinaryOperatorKind.EQUIVALENCE:           5,
}

ASSOCIATIVE: frozenset[BinaryOperatorKind] = frozenset({
    BinaryOperatorKind.CONJUNCTION,
    BinaryOperatorKind.DISJUNCTION,
    BinaryOperatorKind.EXCLUSIVE_DISJUNCTION,
})

MAX_PRECEDENCE: int = max(PRECEDENCE.values())


@dataclass(frozen=True, slots=True)
class UnaryOperator:
    """Operator jednoargumentowy (negacja) wraz z dosłownym zapisem."""
    kind:     UnaryOperatorKind
    spelling: str

    def __str__(self) -> str:
        return self.spelling


@dataclass(frozen=True, slots=True)
class BinaryOperator:
    """Operator dwuargumentowy wraz z dosłownym zapisem, np. ('conjunction', '&&')."""
    kind:     BinaryOperatorKind
    spelling: str

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self.kind]

    @property
    def is_associative(self) -> bool:
        return self.kind in ASSOCIATIVE

    def __str__(self) -> str:
        return self.spelling


# ---------------------------------------------------------------------------
# Pozostałe rodzaje tokenów
# ---------------------------------------------------------------------------

class Delimiter(StrEnum):
    OPEN  = "("
    CLOSE = ")"


@dataclass(frozen=True, slots=True)
class Identifier:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class TruthLiteral:
    value: bool

    def __str__(self) -> str:
        return "1" if self.value else "0"


TokenKind: TypeAlias = Identifier | Delimiter | TruthLiteral | UnaryOperator | BinaryOperator


@dataclass(frozen=True, slots=True)
class Token:
    """Token: rodzaj + span w źródle."""
    kind: TokenKind
    span: Span
