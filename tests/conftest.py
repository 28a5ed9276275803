import pytest

from virus_sim.simulation import Simulation


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def still_pair():
    """Two motionless agents, agent 0 infected, agent 1 healthy."""
    sim = Simulation(duration=1.0, num_agents=2, num_infected=1, seed=0)
    for agent in sim.agents:
        agent.velocity = (0.0, 0.0)
    return sim
