"""
Configuration for the uniform-cost solver.
"""

from dataclasses import dataclass


@dataclass
class SolverConfig:
    """Configuration for the uniform-cost solver."""

    track_path: bool = True  # Keep predecessors so the move list can be rebuilt
    log_frequency: int = 10_000  # Expansions between progress log lines

    def __post_init__(self):
        """Validate configuration."""
        if self.log_frequency <= 0:
            raise ValueError("log_frequency must be positive")
