import logging

import numpy as np
from numba import njit
from . import constants as c

logger = logging.getLogger(__name__)

# --- 1. MOTION (JIT COMPILED) ---

@njit(cache=True)
def integrate(pos, vel, dt):
    """
    Explicit Euler step: pos += vel * dt, in place.
    """
    for i in range(pos.shape[0]):
        pos[i, 0] += vel[i, 0] * dt
        pos[i, 1] += vel[i, 1] * dt

@njit(cache=True)
def resolve_wall_collisions(pos, vel, bound):
    """
    Reflects velocity components of agents outside [-bound, bound].
    Axes are checked independently. Position is NOT clamped, the agent
    re-enters on the next step.
    """
    for i in range(pos.shape[0]):
        if pos[i, 0] < -bound or pos[i, 0] > bound:
            vel[i, 0] = -vel[i, 0]
        if pos[i, 1] < -bound or pos[i, 1] > bound:
            vel[i, 1] = -vel[i, 1]

# --- 2. INFECTION (JIT COMPILED) ---

@njit(cache=True)
def get_collision_mask(pos, diameters):
    """
    (N, N) boolean mask of colliding pairs.
    Two agents collide when their centre distance is below the SUM OF
    DIAMETERS (not radii). Self-pairs are masked out.
    """
    N = pos.shape[0]
    if N == 0: return np.zeros((0, 0), dtype=np.bool_)

    diff = pos.reshape(N, 1, 2) - pos.reshape(1, N, 2)
    dists = np.sqrt(np.sum(diff**2, axis=2))

    reach = diameters.reshape(N, 1) + diameters.reshape(1, N)

    not_self_mask = np.ones((N, N)) - np.eye(N)
    return (dists < reach) & (not_self_mask > 0.5)

@njit(cache=True)
def spread_infection(states, collisions, healthy_id, infected_id):
    """
    Ordered pairwise scan (i, j) in index order, reading LIVE state.
    If either agent of a colliding pair is infected, both end up infected.
    Only healthy agents transition. Returns the number of new infections.
    """
    N = states.shape[0]
    newly_infected = 0

    for i in range(N):
        for j in range(N):
            if not collisions[i, j]:
                continue
            if states[i] != infected_id and states[j] != infected_id:
                continue

            if states[i] == healthy_id:
                states[i] = infected_id
                newly_infected += 1
            if states[j] == healthy_id:
                states[j] = infected_id
                newly_infected += 1

    return newly_infected

# --- 3. STATE MANAGEMENT ---

def init_state(num_agents, num_infected, rng=None):
    """
    Builds the Structure-of-Arrays population.
    Row index is the agent's identity for the lifetime of the simulation.
    """
    if rng is None:
        rng = np.random.default_rng()

    bound = c.ARENA_HALF_EXTENT

    pos = rng.uniform(-bound, bound, size=(num_agents, 2))

    # Heading in degrees, converted to a fixed-magnitude velocity
    angles = np.radians(rng.uniform(0.0, 360.0, size=num_agents))
    vel = np.stack((np.cos(angles), np.sin(angles)), axis=1) * c.AGENT_SPEED

    diameters = np.full(num_agents, c.AGENT_DIAMETER, dtype=np.float64)

    # Seed infections: the first `num_infected` agents, by construction order
    states = np.full(num_agents, c.STATE_HEALTHY, dtype=np.int64)
    states[:num_infected] = c.STATE_INFECTED

    return {
        'pos': np.ascontiguousarray(pos, dtype=np.float64),
        'vel': np.ascontiguousarray(vel, dtype=np.float64),
        'diameters': diameters,
        'states': states,
    }

def tick(state, dt=c.DT):
    """
    Python orchestration layer. Moves everyone, bounces, then spreads.
    Returns the number of agents infected during this tick.
    """
    pos = state['pos']
    vel = state['vel']
    diameters = state['diameters']
    states = state['states']

    if len(pos) == 0: return 0

    # 1. Motion + walls
    integrate(pos, vel, dt)
    resolve_wall_collisions(pos, vel, c.ARENA_HALF_EXTENT)

    # 2. Pairwise infection
    collisions = get_collision_mask(pos, diameters)
    newly_infected = spread_infection(states, collisions, c.STATE_HEALTHY, c.STATE_INFECTED)

    if newly_infected:
        logger.debug("%d new infection(s) this tick", newly_infected)

    return newly_infected

def warm_up():
    """
    Compiles (or loads from cache) every kernel on a throwaway pair of agents,
    so the first real tick is not paying for JIT compilation.
    """
    scratch = init_state(2, 1, np.random.default_rng(0))
    tick(scratch, c.DT)

# --- 4. GETTERS ---
def get_agents_pos(state): return state['pos'].copy()
def get_agents_size(state): return state['diameters'].copy()
def get_agents_state(state): return state['states'].copy()

def get_state_counts(state):
    """
    Returns {state_id: count} for every known state id.
    """
    counts = np.bincount(state['states'], minlength=c.STATE_DEAD + 1)
    return {state_id: int(counts[state_id]) for state_id in
            (c.STATE_HEALTHY, c.STATE_INFECTED, c.STATE_RECOVERED, c.STATE_DEAD)}
