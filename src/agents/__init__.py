"""
Solver agents module.

Provides the move sources used by the step orchestrator:
- LogicAgent: Certain moves from local single-cell rules
- RandomAgent: Uniform random frontier reveal as a fallback
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .logic_agent import LogicAgent, CellInfo

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "LogicAgent",
    "CellInfo",
]
