"""
tableau/solve.py — wyznaczanie minimalnych rozwiązań z tableau.

Publiczne API:
  Solutions.from_tableau(tableau)  → Solutions  (surowe, z powtórzeniami)
  Solutions.clean()                → Solutions  (bez duplikatów i nadzbiorów)
  Solution                         częściowe wartościowanie zmiennych

Ekstrakcja to zwinięcie drzewa od liści:
  1. liść daje jedno puste rozwiązanie,
  2. węzeł z gałęziami — konkatenację rozwiązań gałęzi (alternatywy),
  3. następnie oczekiwania węzła nakładane są na każde rozwiązanie:
       atom       — przypisanie zmiennej; sprzeczne rozwiązania odpadają,
       stała      — niezgodna z oczekiwaniem zamyka gałąź (czyści zbiór),
       pozostałe  — pomijane (ich ograniczenia są już w poddrzewach).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from formula import Atomic, TruthValue

from .types import Tableau


@dataclass(slots=True)
class Solution:
    """Częściowe wartościowanie: uporządkowane pary (zmienna, wartość), każda zmienna co najwyżej raz."""
    variables: list[tuple[str, bool]] = field(default_factory=list)

    def get(self, name: str) -> bool | None:
        for n, v in self.variables:
            if n == name:
                return v
        return None

    def contains(self, name: str, value: bool) -> bool:
        return (name, value) in self.variables

    def push(self, name: str, value: bool) -> None:
        self.variables.append((name, value))

    def as_dict(self) -> dict[str, bool]:
        return dict(self.variables)

    def __len__(self) -> int:
        return len(self.variables)

    def __iter__(self) -> Iterator[tuple[str, bool]]:
        return iter(self.variables)

    def __str__(self) -> str:
        return ", ".join(f"{n}: {'T' if v else 'F'}" for n, v in self.variables)


@dataclass(slots=True)
class Solutions:
    """Zbiór rozwiązań (lista; powtórzenia i nadzbiory usuwa clean())."""
    solutions: list[Solution] = field(default_factory=list)

    @classmethod
    def from_tableau(cls, tableau: Tableau) -> Solutions:
        this = cls()

        if not tableau.branches:
            this.solutions.append(Solution())

        for branch in tableau.branches:
            this.solutions.extend(cls.from_tableau(branch.tableau).solutions)

        for expectation in tableau.expectations:
            match expectation.expr:
                case Atomic(name=name):
                    this.push(name, expectation.truth_value)
                case TruthValue(value=value):
                    if value != expectation.truth_value:
                        this.clear()

        return this

    # ------------------------------------------------------------------

    def push(self, name: str, value: bool) -> None:
        """
        Przypisuje `name = value` w każdym rozwiązaniu.

        Rozwiązanie z inną wartością tej zmiennej jest odrzucane.
        """
        kept: list[Solution] = []
        for solution in self.solutions:
            current = solution.get(name)
            if current is None:
                solution.push(name, value)
                kept.append(solution)
            elif current == value:
                kept.append(solution)
        self.solutions = kept

    def clear(self) -> None:
        self.solutions.clear()

    def clean(self) -> Solutions:
        """
        Zwraca kopię bez rozwiązań nadmiarowych:
          - duplikatów (porównanie pełnych list przypisań; zostaje pierwsze),
          - rozwiązań B, dla których istnieje krótsze A zawarte w B.

        Porównanie parami, O(n²); pochłanianie działa tylko w kierunku
        krótsze → dłuższe.
        """
        redundant: set[int] = set()

        for i, a in enumerate(self.solutions):
            for j, b in enumerate(self.solutions):
                if i != j and a == b and i not in redundant:
                    redundant.add(j)

                if len(a) < len(b) and all(b.contains(n, v) for n, v in a):
                    redundant.add(j)

        return Solutions([
            Solution(list(s.variables))
            for i, s in enumerate(self.solutions)
            if i not in redundant
        ])

    def __len__(self) -> int:
        return len(self.solutions)

    def __iter__(self) -> Iterator[Solution]:
        return iter(self.solutions)

    def __bool__(self) -> bool:
        return bool(self.solutions)
