"""
tableau/tree.py — tableau jako drzewo rich (wyjście terminalowe).

Każdy węzeł drzewa to lista oczekiwań "wyrażenie : T/F". Gałąź zamknięta
(sprzeczne przypisanie zmiennej albo stała o złej wartości na ścieżce)
kończy się znacznikiem ✗, otwarty liść — znacznikiem ○.
"""

from __future__ import annotations

from rich.text import Text
from rich.tree import Tree

from formula import Atomic, TruthValue

from .types import Expectation, Tableau


class TreeTableauWriter:
    def __init__(self, show_ids: bool = False) -> None:
        self.show_ids = show_ids
        self.tree: Tree | None = None

    def _line(self, label: Text, expectation: Expectation) -> None:
        if self.show_ids:
            label.append(f"{expectation.id}. ", style="dim")
        label.append(str(expectation.expr), style="bold")
        label.append(" : ")
        if expectation.truth_value:
            label.append("T", style="green")
        else:
            label.append("F", style="red")

    def _label(self, tableau: Tableau, path: dict[str, bool]) -> tuple[Text, bool]:
        """Etykieta węzła i informacja, czy ścieżka została zamknięta."""
        label  = Text()
        closed = False
        for i, expectation in enumerate(tableau.expectations):
            if i:
                label.append("\n")
            self._line(label, expectation)

            match expectation.expr:
                case Atomic(name=name):
                    if path.setdefault(name, expectation.truth_value) != expectation.truth_value:
                        closed = True
                case TruthValue(value=value):
                    if value != expectation.truth_value:
                        closed = True

        if closed:
            label.append("\n✗", style="bold red")
        elif not tableau.branches:
            label.append("\n○", style="bold green")
        return label, closed

    def _write(self, node: Tree, tableau: Tableau, path: dict[str, bool]) -> None:
        for branch in tableau.branches:
            sub_path = dict(path)
            label, closed = self._label(branch.tableau, sub_path)
            child = node.add(label)
            if not closed:
                self._write(child, branch.tableau, sub_path)

    def write_tableau(self, tableau: Tableau) -> None:
        path: dict[str, bool] = {}
        label, closed = self._label(tableau, path)
        self.tree = Tree(label, guide_style="dim")
        if not closed:
            self._write(self.tree, tableau, path)

    def finalize(self) -> Tree:
        if self.tree is None:
            raise ValueError("Brak tableau — najpierw wywołaj write_tableau().")
        return self.tree
