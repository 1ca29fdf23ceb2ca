"""
Search results for the numbers solver.

A ``SolveResult`` carries everything an outer collaborator needs to print
the outcome of a search: the accepted solutions in discovery order, their
intuition scores, the attempt counter and the best-ranked solution.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, TYPE_CHECKING

from .expression_tree import Node

if TYPE_CHECKING:
    from .solver import SolveMode


@dataclass
class Solution:
    expression: Node       # owned copy of the matching tree
    intuition_score: int   # lower reads more naturally
    attempt: int           # attempt counter value when the match was found

    def to_string(self) -> str:
        return self.expression.to_string()

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class SolveResult:
    target: int
    numbers: Tuple[int, ...]
    mode: 'SolveMode'
    attempts: int = 0
    solutions: List[Solution] = field(default_factory=list)
    best: Optional[Solution] = None

    @property
    def solved(self) -> bool:
        return bool(self.solutions)

    @property
    def solution_count(self) -> int:
        return len(self.solutions)

    def ranked(self) -> List[Solution]:
        """Solutions by intuition score; ties keep discovery order"""
        return sorted(self.solutions, key=lambda solution: solution.intuition_score)

    def expressions(self) -> List[str]:
        return [solution.to_string() for solution in self.solutions]
