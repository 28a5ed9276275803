import logging
import time

import streamlit as st
from . import render       # The View
from . import constants as c
from .agent import InfectionState

logger = logging.getLogger(__name__)

def run_simulation(canvas_placeholder, iteration_placeholder, chart_placeholder, simulation):
    """
    The main Game Loop. Drives `simulation` at the fixed DT cadence until it
    expires or the user presses Stop.
    """

    # --- 1. ARM ---
    simulation.start()

    count_history = st.session_state.setdefault("count_history", [])
    frame_count = 0

    # --- 2. THE LOOP ---
    while simulation.running:
        if not st.session_state.get("sim_running", False):
            simulation.stop()
            break

        # A. TICK (one at a time, the loop never overlaps itself)
        simulation.step(c.DT)

        # B. SNAPSHOT (read only after the tick completes)
        pos_array = simulation.positions()
        size_array = simulation.diameters()
        colors = simulation.colors()
        counts = simulation.state_counts()

        count_history.append({
            "Tick": simulation.iteration,
            "Healthy": counts[InfectionState.HEALTHY],
            "Infected": counts[InfectionState.INFECTED],
        })
        if len(count_history) > c.CHART_HISTORY:
            count_history.pop(0)

        # C. RENDER CANVAS (Every Frame)
        frame = render.render_frame(pos_array, colors, size_array)
        canvas_placeholder.image(frame, channels="RGB")
        iteration_placeholder.metric(label="Iteration", value=simulation.iteration)

        # D. RENDER CHART (Every few Frames)
        if frame_count % c.CHART_EVERY == 0:
            render.render_chart(chart_placeholder, count_history)

        frame_count += 1

        # E. YIELD
        time.sleep(c.DT)

    # --- 3. FINAL FRAME ---
    render.render_chart(chart_placeholder, count_history)
    st.session_state.sim_running = False
    logger.info("Loop exited after %d iterations", simulation.iteration)
