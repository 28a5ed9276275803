import streamlit as st
import numpy as np
import cv2
import pandas as pd
import altair as alt
from . import constants as c

# --- 1. UI GETTERS ---

def render_sidebar_controls(stop_callback):
    """
    Draws the sidebar controls for the LIVE simulation phase.
    Returns the placeholders the loop writes into.
    """
    st.sidebar.markdown(
        "<h1 style='text-align: center;'>Live Controls</h1>",
        unsafe_allow_html=True
    )

    iteration_placeholder = st.sidebar.empty()
    st.sidebar.markdown("---")

    st.sidebar.markdown("### Infection Monitor")
    chart_placeholder = st.sidebar.empty()
    st.sidebar.markdown("---")

    sb_col1, sb_col2, sb_col3 = st.sidebar.columns([1, 2, 1])

    with sb_col2:
        st.button(
            "Stop!",
            on_click=stop_callback,
            type="secondary",
            use_container_width=True
        )

    st.sidebar.info(
        """
        **Legend:**
        - 🟢 Green: Healthy
        - 🔴 Red: Infected
        - 🔵 Blue: Recovered
        - ⚪ Gray: Dead
        """
    )

    return iteration_placeholder, chart_placeholder

def render_chart(placeholder, count_history):
    """
    Updates the sidebar chart: one line per infection state over time.
    `count_history` is a list of {"Tick": int, "Healthy": int, "Infected": int}.
    """
    if not count_history:
        return

    df = pd.DataFrame(count_history)
    long_df = df.melt(id_vars="Tick", var_name="State", value_name="Agents")

    chart = alt.Chart(long_df).mark_line().encode(
        x=alt.X('Tick', axis=alt.Axis(title='Time (Ticks)')),
        y=alt.Y('Agents', axis=alt.Axis(title='Agents')),
        color=alt.Color(
            'State',
            scale=alt.Scale(domain=["Healthy", "Infected"], range=["#2ecc40", "#ff4136"])
        )
    ).properties(
        height=150
    )

    placeholder.altair_chart(chart, use_container_width=True)

# --- 2. RENDER HELPERS ---

def get_bgr_color(color_name):
    """
    Converts a display colour name to BGR. Unknown names draw as dead/gray.
    """
    return c.COLORS_BGR.get(color_name, c.COLORS_BGR[c.COLOR_NAME_DEAD])

def to_pixels(x, y):
    """
    Arena coordinates ([-500, 500], origin at centre) -> canvas pixels.
    """
    centre = c.CANVAS_SIZE_PX / 2.0
    px = int(centre + x * c.PIXELS_PER_UNIT)
    py = int(centre + y * c.PIXELS_PER_UNIT)
    return px, py

def render_arena(img):
    """
    Outlines the [-500, 500] arena.
    """
    top_left = to_pixels(-c.ARENA_HALF_EXTENT, -c.ARENA_HALF_EXTENT)
    bottom_right = to_pixels(c.ARENA_HALF_EXTENT, c.ARENA_HALF_EXTENT)
    cv2.rectangle(img, top_left, bottom_right, c.COLOR_BORDER, 1)

def render_agent(img, x, y, size, color_name):
    """
    Draws a single agent onto the image.
    """
    px, py = to_pixels(x, y)

    # Size Transform (Diameter -> Radius)
    radius = int((size * c.PIXELS_PER_UNIT) / 2)
    radius = max(1, radius)

    cv2.circle(img, (px, py), radius, get_bgr_color(color_name), -1)

    if radius > 2:
        cv2.circle(img, (px, py), radius, c.COLOR_OUTLINE, 1)

# --- 3. MAIN RENDER FUNCTION ---

def render_frame(positions, colors, sizes):
    """
    Main Rendering Function.
    Iterates through SoA data and calls helpers.
    """
    # 1. Init Canvas
    img = np.full((c.CANVAS_SIZE_PX, c.CANVAS_SIZE_PX, 3), c.COLOR_BG, dtype=np.uint8)

    # 2. Arena Border
    render_arena(img)

    # 3. Draw Agents
    for i in range(len(positions)):
        x, y = positions[i]
        render_agent(img, x, y, sizes[i], colors[i])

    # 4. Convert to RGB for Streamlit
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
