import math
from enum import IntEnum

from . import constants as c
from . import physics


class InfectionState(IntEnum):
    HEALTHY = c.STATE_HEALTHY
    INFECTED = c.STATE_INFECTED
    # Never produced by any transition yet
    RECOVERED = c.STATE_RECOVERED
    DEAD = c.STATE_DEAD


DISPLAY_COLORS = {
    InfectionState.HEALTHY: c.COLOR_NAME_HEALTHY,
    InfectionState.INFECTED: c.COLOR_NAME_INFECTED,
    InfectionState.RECOVERED: c.COLOR_NAME_RECOVERED,
    InfectionState.DEAD: c.COLOR_NAME_DEAD,
}


def derive_display_color(state):
    """Maps an infection state to the colour name the renderer draws."""
    return DISPLAY_COLORS[InfectionState(state)]


class Agent:
    """
    One individual of a population.

    An Agent is a view onto row `index` of the population arrays owned by a
    Simulation. The index is its identity: two agents standing on the same
    spot with the same velocity are still two agents.
    """

    def __init__(self, population, index):
        self._population = population
        self._index = index

    @property
    def index(self):
        return self._index

    @property
    def position(self):
        x, y = self._population['pos'][self._index]
        return float(x), float(y)

    @position.setter
    def position(self, value):
        self._population['pos'][self._index] = value

    @property
    def velocity(self):
        vx, vy = self._population['vel'][self._index]
        return float(vx), float(vy)

    @velocity.setter
    def velocity(self, value):
        self._population['vel'][self._index] = value

    @property
    def speed(self):
        return math.hypot(*self.velocity)

    @property
    def diameter(self):
        return float(self._population['diameters'][self._index])

    @property
    def state(self):
        return InfectionState(int(self._population['states'][self._index]))

    def _rows(self):
        # One-row slices are views, so the kernels mutate the population in place
        i = self._index
        return self._population['pos'][i:i + 1], self._population['vel'][i:i + 1]

    def integrate(self, dt):
        """
        Advances the position by `dt` seconds, then bounces off the walls
        using the new position.
        """
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")

        pos, vel = self._rows()
        physics.integrate(pos, vel, dt)
        self.resolve_wall_collision()

    def resolve_wall_collision(self):
        pos, vel = self._rows()
        physics.resolve_wall_collisions(pos, vel, c.ARENA_HALF_EXTENT)

    def display_color(self):
        return derive_display_color(self.state)

    def __repr__(self):
        x, y = self.position
        return f"Agent(index={self._index}, position=({x:.1f}, {y:.1f}), state={self.state.name})"
