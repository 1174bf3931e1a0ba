"""
tableau — tableau semantyczne dla logiki zdań i minimalne rozwiązania.

Publiczne API:
  Tableau.parse(source, expect)     → Tableau
  build(expr, expect)               → Tableau
  TableauBuilder                    budowa z licznikiem id
  Solutions.from_tableau(tableau)   → Solutions
  Solutions.clean()                 → Solutions (minimalne rozwiązania)
  Expectation, TableauBranch, Solution   typy danych
  ExpressionWriter, TableauWriter   interfejsy zapisu
  LatexExpressionWriter, LatexTableauWriter, TreeTableauWriter

Typowe użycie:
    from tableau import Tableau, Solutions

    tableau   = Tableau.parse("A -> B", True)
    solutions = Solutions.from_tableau(tableau).clean()
    for solution in solutions:
        print(dict(solution))     # {'A': False}, {'B': True}
"""

from .types import Expectation, Tableau, TableauBranch
from .builder import TableauBuilder, build
from .solve import Solution, Solutions
from .writer import ExpressionWriter, TableauWriter
from .latex import LatexExpressionWriter, LatexTableauWriter, latex_expression
from .tree import TreeTableauWriter

__all__ = [
    # types
    "Expectation",
    "Tableau",
    "TableauBranch",
    # builder
    "TableauBuilder",
    "build",
    # solve
    "Solution",
    "Solutions",
    # writers
    "ExpressionWriter",
    "TableauWriter",
    "LatexExpressionWriter",
    "LatexTableauWriter",
    "latex_expression",
    "TreeTableauWriter",
]
