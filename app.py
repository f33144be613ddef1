# app.py
"""
Double-Slit Experiment — Streamlit app
Far-field interference with a single-slit envelope, animated waves and
particle-by-particle build-up of the pattern.
"""
import streamlit as st
import numpy as np
import matplotlib.pyplot as plt

from double_slit import FrameLoop, Simulation
from double_slit.config import FPS, FRAMES_PER_RUN, NUM_PARTICLES, RANDOM_SEED
from double_slit.constants import PARAM_BOUNDS
from double_slit.logging_config import setup_logging
from double_slit.physics import fringe_spacing
from double_slit.rendering import plot_detections, plot_intensity, plot_wave_field
from double_slit.validation import format_param_value, slit_constraint_message

logger = setup_logging("double_slit")

# ---------------- Page config ----------------
st.set_page_config(page_title="Double-Slit Simulation", layout="wide")
st.title("Double-Slit Experiment — Interactive Simulation")
st.caption("Two-source interference × single-slit diffraction envelope (far-field approximation)")

# ---------------- Session state ----------------
# One Simulation per browser session; it owns params, clock and particles.
if "simulation" not in st.session_state:
    st.session_state.simulation = Simulation(
        rng=np.random.default_rng(RANDOM_SEED), num_particles=NUM_PARTICLES
    )
sim = st.session_state.simulation
current = sim.params


def bounded_slider(label, key, step):
    low, high, unit = PARAM_BOUNDS[key]
    suffix = f" ({unit})" if unit else ""
    return st.slider(label + suffix, float(low), float(high), float(getattr(current, key)), step=step, key=f"slider_{key}")


# ---------------- Sidebar / Controls ----------------
with st.sidebar:
    col_pause, col_reset = st.columns(2)
    pause_clicked = col_pause.button("Play" if current.is_paused else "Pause")
    reset_clicked = col_reset.button("Reset")

    st.header("Physics")
    wavelength = bounded_slider("Wavelength λ", "wavelength", 0.01)
    slit_separation = bounded_slider("Slit separation d", "slit_separation", 0.1)
    slit_width = bounded_slider("Slit width w", "slit_width", 0.01)
    screen_distance = bounded_slider("Screen distance D", "screen_distance", 0.5)

    st.markdown("---")
    st.header("Animation")
    wave_speed = bounded_slider("Wave speed", "wave_speed", 0.1)
    particle_rate = bounded_slider("Particle rate", "particle_rate", 10.0)
    time_scale = bounded_slider("Time scale", "time_scale", 0.1)

    st.markdown("---")
    st.header("Display")
    show_waves = st.checkbox("Show waves", value=current.show_waves)
    amplitude = bounded_slider("Wave amplitude", "amplitude", 0.05)
    particle_mode = st.checkbox(
        "Particle mode", value=current.particle_mode,
        help="Show individual photons hitting the detection screen",
    )
    intensity_scale = st.selectbox("Intensity scale", ["linear", "log"], index=0)
    colormap = st.selectbox("Wave colormap", ["coolwarm", "RdBu", "viridis", "inferno"], index=0)

slit_warning = slit_constraint_message(slit_width, slit_separation)
if slit_warning:
    st.warning(f"{slit_warning}: width reduced to 80% of the separation.")

# ---------------- Apply the update ----------------
params = sim.update_params(
    wavelength=wavelength,
    slit_separation=slit_separation,
    slit_width=slit_width,
    screen_distance=screen_distance,
    amplitude=amplitude,
    wave_speed=wave_speed,
    particle_rate=particle_rate,
    time_scale=time_scale,
    show_waves=show_waves,
    particle_mode=particle_mode,
    is_paused=not current.is_paused if pause_clicked else current.is_paused,
)
logger.debug("Applied parameters: %s", params)
if reset_clicked:
    sim.reset()
if pause_clicked:
    st.rerun()

# ---------------- Calculated values ----------------
spacing = fringe_spacing(params)
st.markdown(
    f"**Fringe spacing (λD/d):** `{spacing:.3f} μm` | "
    f"λ = {format_param_value('wavelength', params.wavelength)} μm | "
    f"d = {format_param_value('slit_separation', params.slit_separation)} μm | "
    f"w = {format_param_value('slit_width', params.slit_width)} μm | "
    f"D = {format_param_value('screen_distance', params.screen_distance)} μm"
)

# ---------------- Plot 1D ----------------
fig1 = plot_intensity(params, scale=intensity_scale)
st.pyplot(fig1)
plt.close(fig1)

# ---------------- Animated views ----------------
status = st.empty()
wave_slot = st.empty() if params.show_waves else None
particle_slot = st.empty() if params.particle_mode else None


def draw(frame):
    status.markdown(f"**Simulation time:** `{frame.time:.2f} s`" + (" (paused)" if frame.params.is_paused else ""))
    if wave_slot is not None:
        fig = plot_wave_field(frame.params, frame.time, colormap=colormap)
        wave_slot.pyplot(fig)
        plt.close(fig)
    if particle_slot is not None:
        fig = plot_detections(frame)
        particle_slot.pyplot(fig)
        plt.close(fig)


unsubscribe = sim.subscribe(draw)
try:
    loop = FrameLoop(sim, fps=FPS)
    if params.is_paused or not (params.show_waves or params.particle_mode):
        loop.step()
    else:
        loop.run(frames=FRAMES_PER_RUN)
finally:
    unsubscribe()

st.markdown("---")
st.markdown("### Physics tips")
st.write(
    "- Larger wavelength (λ) increases fringe spacing.\n"
    "- Smaller slit separation (d) increases fringe spacing.\n"
    "- Slit width (w) controls the diffraction envelope.\n"
    "- Enable both modes to see how waves guide particles!"
)
st.info("Try this: make the slit separation just slightly larger than the wavelength.")
