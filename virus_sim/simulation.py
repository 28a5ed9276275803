import logging
import time
from dataclasses import dataclass

import numpy as np

from . import constants as c
from . import physics
from .agent import Agent, InfectionState, derive_display_color
from .config import SimulationConfig, build_config
from .errors import SimulationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgentSnapshot:
    """What the renderer needs to draw one agent, copied out of the population."""
    index: int
    position: tuple
    diameter: float
    color: str


class Simulation:
    """
    Owns the population and advances it one tick at a time.

    The simulation does not schedule itself: a driver (the streamlit loop,
    `run_headless`, a test) calls `step()` while `running` is True.
    """

    def __init__(self, duration=c.DEFAULT_DURATION, num_agents=c.DEFAULT_NUM_AGENTS,
                 num_infected=c.DEFAULT_NUM_INFECTED, seed=None, clock=time.monotonic):
        self.config = build_config(
            duration=duration, num_agents=num_agents, num_infected=num_infected, seed=seed
        )
        self.duration = self.config.duration
        self.clock = clock

        self.iteration = 0
        self.start_time = None
        self.running = False

        self._stepping = False
        self._listeners = []

        # JIT compile before anyone can start the clock
        physics.warm_up()

        rng = np.random.default_rng(self.config.seed)
        self._population = physics.init_state(self.config.num_agents, self.config.num_infected, rng)
        self.agents = [Agent(self._population, i) for i in range(self.config.num_agents)]

        logger.info(
            "Simulation created: %d agents, %d infected, duration %.2fs",
            self.config.num_agents, self.config.num_infected, self.duration,
        )

    @classmethod
    def from_config(cls, config: SimulationConfig, clock=time.monotonic):
        return cls(
            duration=config.duration,
            num_agents=config.num_agents,
            num_infected=config.num_infected,
            seed=config.seed,
            clock=clock,
        )

    # --- LIFECYCLE ---

    def start(self):
        if self.running:
            return
        self.start_time = self.clock()
        self.running = True
        logger.info("Simulation started at iteration %d", self.iteration)

    def stop(self):
        if not self.running:
            return
        self.running = False
        logger.info("Simulation stopped at iteration %d", self.iteration)

    def elapsed(self):
        if self.start_time is None:
            return 0.0
        return self.clock() - self.start_time

    def add_listener(self, callback):
        """Registers `callback(simulation)`, called after every completed tick."""
        self._listeners.append(callback)

    # --- TICK ---

    def step(self, dt=c.DT):
        """
        Advances the whole population by `dt` seconds.
        Returns the number of agents newly infected in this tick.
        """
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")
        if self._stepping:
            raise SimulationError("step() called while a step is already in progress")

        self._stepping = True
        try:
            newly_infected = physics.tick(self._population, dt)
            self.iteration += 1

            if self.running and self.elapsed() > self.duration:
                self.running = False
                logger.info(
                    "Duration of %.2fs elapsed after %d iterations", self.duration, self.iteration
                )
        finally:
            self._stepping = False

        for callback in self._listeners:
            callback(self)

        return newly_infected

    # --- READ-ONLY VIEWS ---

    def positions(self): return physics.get_agents_pos(self._population)
    def diameters(self): return physics.get_agents_size(self._population)

    def colors(self):
        return [derive_display_color(s) for s in self._population['states']]

    def snapshot(self):
        pos = self.positions()
        sizes = self.diameters()
        colors = self.colors()
        return [
            AgentSnapshot(i, (float(pos[i, 0]), float(pos[i, 1])), float(sizes[i]), colors[i])
            for i in range(len(pos))
        ]

    def state_counts(self):
        counts = physics.get_state_counts(self._population)
        return {InfectionState(state_id): n for state_id, n in counts.items()}


def new_simulation(duration, num_agents, num_infected, **kwargs):
    return Simulation(duration, num_agents, num_infected, **kwargs)


def run_headless(simulation, max_ticks=None, tick_interval=c.DT, sleep=time.sleep):
    """
    Drives `simulation` without a UI until it stops itself, is stopped, or
    `max_ticks` ticks have run. Returns the number of ticks executed.
    """
    simulation.start()
    ticks = 0

    while simulation.running:
        if max_ticks is not None and ticks >= max_ticks:
            simulation.stop()
            break

        simulation.step(c.DT)
        ticks += 1

        if tick_interval > 0 and simulation.running:
            sleep(tick_interval)

    return ticks
