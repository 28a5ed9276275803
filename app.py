import streamlit as st
from virus_sim import render
from virus_sim import loop
from virus_sim import constants as c
from virus_sim.errors import ConfigurationError
from virus_sim.simulation import Simulation


# --- SETUP PAGE CONFIG ---
st.set_page_config(page_title="Virus Simulation", layout="wide")

# --- SESSION STATE INITIALIZATION ---
if "page" not in st.session_state:
    st.session_state.page = "setup"  # Options: "setup", "simulation"

if "sim_running" not in st.session_state:
    st.session_state.sim_running = False

# --- CALLBACKS ---
def start_simulation():
    # 1. Read Slider Values
    params = {
        "duration": float(st.session_state["setup_duration_slider"]),
        "num_agents": st.session_state["setup_agents_slider"],
        "num_infected": st.session_state["setup_infected_slider"],
    }

    # 2. Build the Simulation (configuration errors stop us here)
    try:
        st.session_state.simulation = Simulation(**params)
    except ConfigurationError as e:
        st.session_state.setup_error = str(e)
        return

    st.session_state.pop("setup_error", None)
    st.session_state.count_history = []

    # 3. Switch Page
    st.session_state.page = "simulation"
    st.session_state.sim_running = True

def stop_simulation():
    st.session_state.sim_running = False

    simulation = st.session_state.get("simulation")
    if simulation is not None:
        simulation.stop()

def reset_simulation():
    stop_simulation()
    st.session_state.page = "setup"

    # Discard the population so the next run starts fresh
    st.session_state.pop("simulation", None)
    st.session_state.pop("count_history", None)

# --- MAIN CONTAINER ---
main_interface = st.empty()

# --- PAGE 1: SETUP ---
if st.session_state.page == "setup":

    with main_interface.container():

        st.title("Virus Simulation")
        st.markdown("<h4 style='text-align: center; color: gray;'>Healthy agents, one bad contact at a time</h4>", unsafe_allow_html=True)
        st.markdown("---")

        col1, col2, col3 = st.columns([1, 1, 1])

        # --- LEFT COLUMN: METRICS ---
        with col1:
            st.markdown("### System Status")
            st.metric(label="Integrator", value="Euler")
            st.metric(label="Tick", value=f"{c.DT * 1000:.0f} ms")
            st.markdown("---")
            st.markdown("**Rules:**")
            st.markdown(f"- *Constant speed ({c.AGENT_SPEED:.0f} units/s)*")
            st.markdown("- *Walls reflect, never clamp*")
            st.markdown("- *Contact closer than two diameters infects*")

        # --- MIDDLE COLUMN: INPUTS ---
        with col2:
            with st.container(border=True):
                st.markdown("<h3 style='text-align: center;'>Configuration</h3>", unsafe_allow_html=True)

                st.slider("Number of Agents", 1, 500, c.DEFAULT_NUM_AGENTS, key="setup_agents_slider")
                st.write("")
                st.slider(
                    "Initially Infected",
                    min_value=0,
                    max_value=500,
                    value=c.DEFAULT_NUM_INFECTED,
                    key="setup_infected_slider",
                    help="The first agents created start infected. Must not exceed the number of agents."
                )
                st.write("")
                st.slider("Duration (seconds)", 1, 300, int(c.DEFAULT_DURATION), key="setup_duration_slider")
                st.write("")

                if "setup_error" in st.session_state:
                    st.error(st.session_state.setup_error)

                st.markdown("---")

                st.button("Start!", on_click=start_simulation, type="primary", use_container_width=True)

        # --- RIGHT COLUMN: GUIDE ---
        with col3:
            st.markdown("### User Guide")
            with st.expander("How to use", expanded=True):
                st.markdown("""
                1. **Setup**: Choose how many agents and how many start infected.
                2. **Duration**: Pick how long the run lasts.
                3. **Run**: Press Start and watch the red spread.
                4. **Stop**: Halt early from the sidebar.
                """)

# --- PAGE 2: SIMULATION ---
elif st.session_state.page == "simulation":

    main_interface.empty()

    simulation = st.session_state.get("simulation")

    if simulation is None:
        st.error("No simulation found. Please return to setup.")
        if st.button("Back to Setup"):
            reset_simulation()
            st.rerun()
    else:
        # 1. Sidebar Controls
        iteration_placeholder, chart_placeholder = render.render_sidebar_controls(
            stop_callback=stop_simulation
        )

        if st.sidebar.button("Reset Simulation", use_container_width=True):
            reset_simulation()
            st.rerun()

        # 2. Simulation Layout
        st.markdown("<h2 style='text-align: center;'>Live Simulation</h2>", unsafe_allow_html=True)

        c1, c2, c3 = st.columns([1, 6, 1])
        with c2:
            canvas_placeholder = st.empty()

        # 3. Run the Loop
        if st.session_state.sim_running:
            loop.run_simulation(
                canvas_placeholder,
                iteration_placeholder,
                chart_placeholder,
                simulation
            )
        else:
            # Stopped or finished: keep showing the last state
            frame = render.render_frame(simulation.positions(), simulation.colors(), simulation.diameters())
            canvas_placeholder.image(frame, channels="RGB")
            iteration_placeholder.metric(label="Iteration", value=simulation.iteration)
            render.render_chart(chart_placeholder, st.session_state.get("count_history", []))
            st.info(f"Simulation halted after {simulation.iteration} iterations.")
