"""Agents bouncing around a walled arena, spreading an infection on contact."""
import logging

from .agent import Agent, InfectionState, derive_display_color
from .config import SimulationConfig
from .errors import ConfigurationError, SimulationError
from .simulation import AgentSnapshot, Simulation, new_simulation, run_headless

__all__ = [
    'Agent',
    'AgentSnapshot',
    'ConfigurationError',
    'InfectionState',
    'Simulation',
    'SimulationConfig',
    'SimulationError',
    'derive_display_color',
    'new_simulation',
    'run_headless',
]

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
