"""2-SAT solver built on strongly connected components."""

from __future__ import annotations

from algobox.tarjan import tarjan


class TwoSatSolver:
    """Clauses over variables 1..n; literal ``x`` for x <= n is the variable,
    ``x + n`` its negation.

    After a successful :meth:`solve`, ``assignment`` maps each variable to its value.
    """

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("need at least one variable")
        self.n = n
        self._graph: list[list[int]] = [[] for _ in range(2 * n)]
        self.assignment: dict[int, bool] = {}

    def _check(self, literal: int) -> None:
        if not 1 <= literal <= 2 * self.n:
            raise IndexError(f"literal {literal} outside 1..{2 * self.n}")

    def negate(self, x: int) -> int:
        """The literal opposite to ``x``."""
        self._check(x)
        return x + self.n if x <= self.n else x - self.n

    def add_or(self, u: int, v: int) -> None:
        """Require ``u or v``."""
        not_u, not_v = self.negate(u), self.negate(v)
        self._graph[not_u - 1].append(v - 1)
        self._graph[not_v - 1].append(u - 1)

    def solve(self) -> bool:
        """Find an assignment satisfying every clause; False if none exists."""
        result = tarjan(self._graph)
        comp = result.component
        self.assignment = {}
        for var in range(1, self.n + 1):
            if comp[var - 1] == comp[self.negate(var) - 1]:
                return False
        value: dict[int, bool] = {}
        for comp_id, members in enumerate(result.components, 1):
            if comp_id not in value:
                value[comp_id] = True
                value[comp[self.negate(members[0] + 1) - 1]] = False
        self.assignment = {var: value[comp[var - 1]] for var in range(1, self.n + 1)}
        return True