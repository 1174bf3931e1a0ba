"""
tableau/types.py — podstawowe typy drzewa tableau.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from formula import Expression


@dataclass(frozen=True, slots=True)
class Expectation:
    """Oczekiwanie: wyrażenie `expr` ma na tej ścieżce wartość `truth_value`."""
    expr:        Expression
    truth_value: bool
    id:          int

    def __str__(self) -> str:
        return f"{self.expr} : {'T' if self.truth_value else 'F'}"


@dataclass(slots=True)
class TableauBranch:
    """Gałąź tableau; `expectation_id` wskazuje oczekiwanie, którego rozkład ją utworzył."""
    tableau:        Tableau
    expectation_id: int


@dataclass(slots=True)
class Tableau:
    """
    Węzeł tableau: lista oczekiwań + alternatywne gałęzie.

    Tableau bez gałęzi jest liściem — reprezentuje jeden kandydujący model.
    Struktura budowana jest przez TableauBuilder i po zbudowaniu traktowana
    jako tylko do odczytu.
    """
    expectations: list[Expectation]   = field(default_factory=list)
    branches:     list[TableauBranch] = field(default_factory=list)

    @classmethod
    def parse(cls, source: str, expect: bool = True) -> Tableau:
        """Parsuje `source` i buduje tableau dla oczekiwanej wartości `expect`."""
        from formula import parse
        from tableau.builder import build

        return build(parse(source), expect)

    # ------------------------------------------------------------------

    def clone(self) -> Tableau:
        """Kopia struktury drzewa; oczekiwania (niezmienne) są współdzielone."""
        return Tableau(
            expectations=list(self.expectations),
            branches=[
                TableauBranch(branch.tableau.clone(), branch.expectation_id)
                for branch in self.branches
            ],
        )

    def merge(self, other: Tableau) -> None:
        """Płytkie złączenie: dokleja oczekiwania i gałęzie `other` na najwyższym poziomie."""
        self.expectations.extend(other.expectations)
        self.branches.extend(other.branches)

    def append(self, other: Tableau) -> None:
        """
        Dokleja `other` do każdego liścia — oba zbiory ograniczeń muszą zachodzić
        na każdej dotychczasowej ścieżce.
        """
        if not self.branches:
            self.expectations.extend(other.expectations)
            self.branches.extend(
                TableauBranch(branch.tableau.clone(), branch.expectation_id)
                for branch in other.branches
            )
            return

        for branch in self.branches:
            branch.tableau.append(other)

    def width(self) -> int:
        """Liczba liści (kandydujących modeli); 1 dla tableau bez gałęzi."""
        if not self.branches:
            return 1
        return sum(branch.tableau.width() for branch in self.branches)

    def has_expectation(self, id: int) -> bool:
        """True gdy to tableau lub któreś z jego poddrzew zawiera oczekiwanie o danym id."""
        if any(e.id == id for e in self.expectations):
            return True
        return any(branch.tableau.has_expectation(id) for branch in self.branches)

    def solves_expectation(self, id: int) -> bool:
        """True gdy któraś gałąź (na dowolnej głębokości) powstała z rozkładu oczekiwania `id`."""
        return any(
            branch.expectation_id == id or branch.tableau.solves_expectation(id)
            for branch in self.branches
        )
