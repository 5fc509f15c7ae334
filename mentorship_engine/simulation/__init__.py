"""Simulation layer: engine, assembly and runners."""
from .engine import MentorshipEngine
from .assembly import Assembly
from .runner import ScenarioRunner, TrainingResult, run_training_cycle

__all__ = [
    "MentorshipEngine",
    "Assembly",
    "ScenarioRunner",
    "TrainingResult",
    "run_training_cycle",
]
