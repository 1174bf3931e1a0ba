"""
tableau/latex.py — zapis wyrażeń i tableau w LaTeX.

LatexExpressionWriter → "$A \\land \\neg B$"
LatexTableauWriter    → środowisko picture: każdy liść to kolumna o szerokości
                        40 jednostek, każde oczekiwanie to wiersz o wysokości 10,
                        gałęzie łączone krzywymi \\qbezier.
"""

from __future__ import annotations

from formula import (
    Atomic,
    Binary,
    BinaryOperatorKind,
    Expression,
    Paren,
    TruthValue,
    Unary,
)

from .types import Tableau

COLUMN_WIDTH = 40.0
ROW_HEIGHT   = 10.0
BRANCH_GAP   = 20.0

BINARY_COMMANDS: dict[BinaryOperatorKind, str] = {
    BinaryOperatorKind.CONJUNCTION:           r" \land ",
    BinaryOperatorKind.DISJUNCTION:           r" \lor ",
    BinaryOperatorKind.EXCLUSIVE_DISJUNCTION: r" \oplus ",
    BinaryOperatorKind.IMPLICATION:           r" \to ",
    BinaryOperatorKind.EQUIVALENCE:           r" \leftrightarrow ",
}


def _num(x: float) -> str:
    """Liczba bez zbędnych zer: 80.0 → '80', 3.50 → '3.5'."""
    return f"{round(x, 2) + 0.0:.10g}"


def _truth(value: bool) -> str:
    return "T" if value else "F"


class LatexExpressionWriter:
    def __init__(self) -> None:
        self._buffer: list[str] = []

    def write_expression(self, expr: Expression) -> None:
        match expr:
            case TruthValue(value=value):
                self._buffer.append(_truth(value))
            case Atomic(name=name):
                self._buffer.append(name.replace("_", r"\_"))
            case Paren(inner=inner):
                self._buffer.append("(")
                self.write_expression(inner)
                self._buffer.append(")")
            case Unary(operand=operand):
                self._buffer.append(r"\neg ")
                self.write_expression(operand)
            case Binary(lhs=lhs, operator=operator, rhs=rhs):
                self.write_expression(lhs)
                self._buffer.append(BINARY_COMMANDS[operator.kind])
                self.write_expression(rhs)

    def finalize(self) -> str:
        return f"${''.join(self._buffer)}$"


def latex_expression(expr: Expression) -> str:
    writer = LatexExpressionWriter()
    writer.write_expression(expr)
    return writer.finalize()


class LatexTableauWriter:
    """
    Rysuje tableau w środowisku picture.

    Wymiary liczone są raz, dla korzenia; poddrzewa dziedziczą je i zapisują
    się z przesunięciem (x, y) względem środka rysunku.
    """

    def __init__(self, show_ids: bool = False) -> None:
        self.show_ids = show_ids
        self.x:      float = 0.0
        self.y:      float = 0.0
        self.width:  float = 0.0
        self.height: float = 0.0
        self._has_dimensions = False
        self._buffer: list[str] = []

    @staticmethod
    def tableau_width(tableau: Tableau) -> float:
        return tableau.width() * COLUMN_WIDTH

    @classmethod
    def tableau_height(cls, tableau: Tableau) -> float:
        height = len(tableau.expectations) * ROW_HEIGHT
        for branch in tableau.branches:
            height += cls.tableau_height(branch.tableau)
        return height

    def _child(self) -> LatexTableauWriter:
        child = LatexTableauWriter(show_ids=self.show_ids)
        child.width  = self.width
        child.height = self.height
        child._has_dimensions = True
        return child

    def write_tableau(self, tableau: Tableau) -> None:
        if not self._has_dimensions:
            self.width  = self.tableau_width(tableau)
            self.height = self.tableau_height(tableau)
            self._has_dimensions = True

        cx = self.width / 2.0
        for expectation in tableau.expectations:
            label = latex_expression(expectation.expr)
            if self.show_ids:
                label = rf"{{\scriptsize {expectation.id}.}}~{label}"
            self._buffer.append(
                f"\t\\put({_num(self.x - 4.0 + cx)}, {_num(self.y + self.height)})"
                f"{{\\makebox(0, 0)[r]{{{label}}}}}\n"
            )
            self._buffer.append(
                f"\t\\put({_num(self.x - 1.5 + cx)}, {_num(self.y + self.height)})"
                f"{{\\makebox(0, 0)[l]{{$: {_truth(expectation.truth_value)}$}}}}\n"
            )
            self.y -= ROW_HEIGHT

        count = len(tableau.branches)
        total = self.tableau_width(tableau)
        for i, branch in enumerate(tableau.branches):
            # -1 … 1 od lewej do prawej; pojedyncza gałąź idzie prosto w dół
            offset = i / (count - 1) * 2.0 - 1.0 if count > 1 else 0.0
            offset *= 1.0 - self.tableau_width(branch.tableau) / total

            child = self._child()
            child.x = self.x + total * offset
            child.y = self.y - BRANCH_GAP

            self._buffer.append(
                f"\t\\qbezier({_num(self.x + cx)}, {_num(self.y + self.height)})"
                f"({_num((child.x + self.x) / 2.0 + cx)}, {_num((child.y + 8.0 + self.y) / 2.0 + self.height)})"
                f"({_num(child.x + cx)}, {_num(child.y + 8.0 + self.height)})\n"
            )

            child.write_tableau(branch.tableau)
            self._buffer.extend(child._buffer)

    def finalize(self) -> str:
        return (
            f"\\begin{{picture}}({_num(self.width)}, {_num(self.height)})\n"
            f"{''.join(self._buffer)}\\end{{picture}}"
        )
