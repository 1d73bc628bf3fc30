from dataclasses import dataclass, field
from typing import List, Tuple

GridCoord = Tuple[int, int]

@dataclass
class PlanRequest:
    start: GridCoord
    goal: GridCoord

@dataclass
class PlanResult:
    ok: bool
    path: List[GridCoord] = field(default_factory=list)  # start excluded, goal included
    reason: str = ""
    nodes_explored: int = 0
