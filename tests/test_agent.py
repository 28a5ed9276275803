"""Tests for Agent: motion, wall bounce, colour and identity."""

import pytest

from virus_sim import constants as c
from virus_sim.agent import InfectionState, derive_display_color
from virus_sim.simulation import Simulation


@pytest.fixture
def agent():
    sim = Simulation(duration=1.0, num_agents=3, num_infected=0, seed=3)
    return sim.agents[1]


class TestIntegrate:
    """Tests for Agent.integrate."""

    def test_moves_by_velocity_times_dt(self, agent):
        """Position should advance by velocity * dt on each axis."""
        agent.position = (10.0, -20.0)
        agent.velocity = (100.0, -50.0)

        agent.integrate(0.5)

        assert agent.position == pytest.approx((60.0, -45.0))

    def test_rejects_non_positive_dt(self, agent):
        """A zero or negative time step is a caller error."""
        with pytest.raises(ValueError):
            agent.integrate(0.0)
        with pytest.raises(ValueError):
            agent.integrate(-0.02)

    def test_only_touches_its_own_row(self):
        """Integrating one agent must leave the others where they were."""
        sim = Simulation(duration=1.0, num_agents=3, num_infected=0, seed=5)
        before = [a.position for a in sim.agents]

        sim.agents[1].integrate(c.DT)

        assert sim.agents[0].position == before[0]
        assert sim.agents[2].position == before[2]
        assert sim.agents[1].position != before[1]

    def test_bounce_uses_new_position(self, agent):
        """Crossing the wall during the step flips velocity in the same step."""
        agent.position = (499.0, 0.0)
        agent.velocity = (200.0, 0.0)

        agent.integrate(c.DT)

        x, _ = agent.position
        assert x > c.ARENA_HALF_EXTENT
        assert agent.velocity == pytest.approx((-200.0, 0.0))

    def test_re_entry_after_bounce(self, agent):
        """After a bounce the next step moves the agent back inside."""
        agent.position = (0.0, -499.0)
        agent.velocity = (0.0, -200.0)

        agent.integrate(c.DT)
        outside_y = agent.position[1]
        agent.integrate(c.DT)

        assert outside_y < -c.ARENA_HALF_EXTENT
        assert agent.position[1] > outside_y
        assert agent.position[1] >= -c.ARENA_HALF_EXTENT


class TestWallCollision:
    """Tests for Agent.resolve_wall_collision."""

    def test_exactly_on_bound_does_not_bounce(self, agent):
        """The bound itself is inside the arena (strict inequality)."""
        agent.position = (500.0, -500.0)
        agent.velocity = (200.0, -200.0)

        agent.resolve_wall_collision()

        assert agent.velocity == (200.0, -200.0)

    def test_diagonal_exit_bounces_both_axes(self, agent):
        """Axes are checked independently, a corner exit flips both."""
        agent.position = (501.0, -501.0)
        agent.velocity = (120.0, -160.0)

        agent.resolve_wall_collision()

        assert agent.velocity == (-120.0, 160.0)

    def test_reflects_without_clamping(self, agent):
        """Position is left outside the arena, only direction changes."""
        agent.position = (-510.0, 3.0)
        agent.velocity = (-200.0, 0.0)

        agent.resolve_wall_collision()

        assert agent.position == (-510.0, 3.0)
        assert agent.velocity == (200.0, 0.0)

    def test_bounce_keeps_speed(self, agent):
        """A bounce flips signs, never magnitude."""
        agent.position = (600.0, 600.0)
        agent.velocity = (120.0, 160.0)

        agent.resolve_wall_collision()

        assert agent.speed == pytest.approx(200.0)


class TestDisplayColor:
    """Tests for the state -> colour mapping."""

    @pytest.mark.parametrize("state, color", [
        (InfectionState.HEALTHY, "green"),
        (InfectionState.INFECTED, "red"),
        (InfectionState.RECOVERED, "blue"),
        (InfectionState.DEAD, "gray"),
    ])
    def test_color_per_state(self, state, color):
        """Every declared state has a colour."""
        assert derive_display_color(state) == color

    def test_accepts_raw_state_ids(self):
        """Raw ids from the population arrays map the same way."""
        assert derive_display_color(c.STATE_INFECTED) == "red"

    def test_agent_color_follows_state(self):
        """Seeded agents are red, the rest green."""
        sim = Simulation(duration=1.0, num_agents=4, num_infected=1, seed=1)

        assert [a.display_color() for a in sim.agents] == ["red", "green", "green", "green"]


class TestIdentity:
    """Agents are identified by index, never by value."""

    def test_identical_agents_are_distinct(self):
        """Same position and velocity do not make two agents equal."""
        sim = Simulation(duration=1.0, num_agents=2, num_infected=0, seed=2)
        a, b = sim.agents
        a.position = b.position = (1.0, 1.0)
        a.velocity = b.velocity = (200.0, 0.0)

        assert a != b
        assert len({a, b}) == 2
        assert (a.index, b.index) == (0, 1)

    def test_diameter_is_constant(self, agent):
        """Diameter is fixed at spawn."""
        agent.integrate(c.DT)

        assert agent.diameter == c.AGENT_DIAMETER
