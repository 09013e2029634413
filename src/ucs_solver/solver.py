"""
Uniform-cost (Dijkstra) solver for organizing the amphipod burrow.
"""

import heapq
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..burrow.moves import Move, MoveGenerator
from ..burrow.state import State
from ..util.logger import logger
from .config import SolverConfig

ExpandCallback = Callable[[int, State], None]


@dataclass
class UCSResult:
    """Result of uniform-cost solving."""

    cost: Optional[int]
    solution: Optional[List[Move]]
    solution_length: int
    nodes_explored: int
    states_seen: int
    time_taken_ms: float
    success: bool


@dataclass(order=True)
class FrontierEntry:
    """Heap entry ordered by accumulated cost alone."""

    cost: int
    state: State = field(compare=False)


class UCSSolver:
    """Uniform-cost search over burrow states."""

    def __init__(
        self,
        config: Optional[SolverConfig] = None,
        move_generator: Optional[MoveGenerator] = None,
    ):
        """Initialize uniform-cost solver.

        Args:
            config: Solver configuration, defaults to SolverConfig()
            move_generator: Source of successor states
        """
        self.config = config or SolverConfig()
        self.move_generator = move_generator or MoveGenerator()
        self.expand_callbacks: List[ExpandCallback] = []
        self.logger = logger.bind(component="ucs_solver")

    def add_expand_callback(self, callback: ExpandCallback) -> None:
        self.expand_callbacks.append(callback)

    def remove_expand_callback(self, callback: ExpandCallback) -> None:
        if callback in self.expand_callbacks:
            self.expand_callbacks.remove(callback)

    def solve(self, initial: State) -> UCSResult:
        """Find the least energy needed to organize the burrow.

        Args:
            initial: Starting state

        Returns:
            UCSResult with the minimum cost if the burrow can be organized
        """
        start_time = time.time()

        best_cost: Dict[State, int] = {initial: 0}
        came_from: Dict[State, Tuple[State, Move]] = {}
        frontier = [FrontierEntry(0, initial)]
        nodes_explored = 0

        self.logger.info(f"Searching from {initial!r}")

        while frontier:
            entry = heapq.heappop(frontier)
            cost, state = entry.cost, entry.state

            if state.organized():
                elapsed_ms = (time.time() - start_time) * 1000
                solution = self._rebuild_path(came_from, state)
                self.logger.bind(expansions=nodes_explored, cost=cost).info(
                    f"Organized burrow ({elapsed_ms:.1f}ms)"
                )
                return UCSResult(
                    cost=cost,
                    solution=solution,
                    solution_length=len(solution) if solution is not None else 0,
                    nodes_explored=nodes_explored,
                    states_seen=len(best_cost),
                    time_taken_ms=elapsed_ms,
                    success=True,
                )

            # A cheaper route to this state was found after it was queued
            if cost > best_cost.get(state, cost):
                continue

            nodes_explored += 1
            for callback in self.expand_callbacks:
                callback(cost, state)
            if nodes_explored % self.config.log_frequency == 0:
                self.logger.bind(expansions=nodes_explored, cost=cost).debug(
                    f"frontier {len(frontier)}, seen {len(best_cost)}"
                )

            for delta, successor, move in self.move_generator.successors(state):
                total = cost + delta
                previous = best_cost.get(successor)
                if previous is not None and total >= previous:
                    continue
                best_cost[successor] = total
                if self.config.track_path:
                    came_from[successor] = (state, move)
                heapq.heappush(frontier, FrontierEntry(total, successor))

        elapsed_ms = (time.time() - start_time) * 1000
        self.logger.info(
            f"Frontier exhausted after {nodes_explored} expansions, no solution"
        )
        return UCSResult(
            cost=None,
            solution=None,
            solution_length=0,
            nodes_explored=nodes_explored,
            states_seen=len(best_cost),
            time_taken_ms=elapsed_ms,
            success=False,
        )

    def _rebuild_path(
        self, came_from: Dict[State, Tuple[State, Move]], goal: State
    ) -> Optional[List[Move]]:
        if not self.config.track_path:
            return None

        moves: List[Move] = []
        state = goal
        while state in came_from:
            state, move = came_from[state]
            moves.append(move)
        moves.reverse()
        return moves

    def replay(self, initial: State, moves: Sequence[Move]) -> List[State]:
        """Apply a move list to a state, returning every state visited.

        Raises:
            ValueError: if a move is not legal from the state it is applied to
        """
        states = [initial]
        for step, move in enumerate(moves, start=1):
            current = states[-1]
            for _, successor, candidate in self.move_generator.successors(current):
                if candidate == move:
                    states.append(successor)
                    break
            else:
                raise ValueError(f"move {step} ({move}) is not legal")
        return states
