"""Ordered SQL fragments with positional parameters, rendered in a single pass.

Fragments carry a ``{}`` slot where their parameter's ``$n`` placeholder goes.
Numbering is assigned at render time from the order fragments were added, so
it is always contiguous and always matches the parameter list.
"""
from dataclasses import dataclass, field
from typing import Any, List, Tuple

_NO_PARAM = object()

@dataclass
class Clause:
    fragment: str
    parameter: Any = _NO_PARAM

    @property
    def binds(self) -> bool:
        return self.parameter is not _NO_PARAM

@dataclass
class ClauseList:
    clauses: List[Clause] = field(default_factory=list)
    _conditions: int = 0

    def add(self, fragment: str, parameter: Any = _NO_PARAM) -> "ClauseList":
        self.clauses.append(Clause(fragment, parameter))
        return self

    def where(self, condition: str, parameter: Any) -> "ClauseList":
        # First condition opens the WHERE clause, the rest are ANDed on.
        keyword = "WHERE" if self._conditions == 0 else "AND"
        self._conditions += 1
        return self.add(f"{keyword} {condition}", parameter)

    def render(self) -> Tuple[str, list]:
        parts: List[str] = []
        params: list = []
        for clause in self.clauses:
            if clause.binds:
                params.append(clause.parameter)
                parts.append(clause.fragment.format(f"${len(params)}"))
            else:
                parts.append(clause.fragment)
        return "\n".join(parts) + ";", params
