"""Application services."""

from .decision_engine import DecisionEngine, get_decision_engine

__all__ = [
    "DecisionEngine",
    "get_decision_engine",
]
