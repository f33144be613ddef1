"""Matplotlib views of a simulation frame, used by the Streamlit page."""

import matplotlib.pyplot as plt
import numpy as np

from double_slit.constants import SCREEN_WIDTH, WAVE_FIELD_WIDTH
from double_slit.physics import fringe_markers, intensity_profile, wave_field


def plot_intensity(params, resolution=800, scale="linear", show_markers=True):
    """1D pattern across the detection screen, optionally with fringe markers."""
    z = np.linspace(-SCREEN_WIDTH / 2.0, SCREEN_WIDTH / 2.0, int(resolution))
    values = intensity_profile(z, params)

    fig, ax = plt.subplots(figsize=(9, 3.6))
    if scale == "log":
        # convert to dB; add small floor
        ax.plot(z, 10.0 * np.log10(values + 1e-12))
        ax.set_ylabel("Intensity (dB, normalized)")
    else:
        ax.plot(z, values)
        ax.set_ylabel("Normalized intensity")

    if show_markers:
        for _, _, marker_z in fringe_markers(params):
            if abs(marker_z) <= SCREEN_WIDTH / 2.0:
                ax.axvline(marker_z, color="green", alpha=0.4, linewidth=0.8)

    ax.set_xlabel("Screen position z (μm)")
    ax.set_title("Interference pattern on the detection screen")
    ax.grid(True)
    return fig


def plot_wave_field(params, t, nx=240, nz=180, colormap="coolwarm"):
    """Top view of the two-slit wave field between the barrier and the screen at time ``t``."""
    x_vec = np.linspace(0.0, params.screen_distance, int(nx))
    z_vec = np.linspace(-WAVE_FIELD_WIDTH / 2.0, WAVE_FIELD_WIDTH / 2.0, int(nz))
    X, Z = np.meshgrid(x_vec, z_vec)
    field = wave_field(X, Z, params, t)

    fig, ax = plt.subplots(figsize=(7, 5))
    extent = [x_vec[0], x_vec[-1], z_vec[0], z_vec[-1]]
    limit = max(float(np.abs(field).max()), 1e-12)
    im = ax.imshow(field, extent=extent, origin="lower", aspect="auto", cmap=colormap, vmin=-limit, vmax=limit)
    ax.set_title(f"Wave field, t = {t:.2f} s")
    ax.set_xlabel("x (μm)")
    ax.set_ylabel("z (μm)")
    fig.colorbar(im, ax=ax, label="Displacement")
    return fig


def plot_detections(frame, bins=60):
    """Particles in flight and on the screen, next to a histogram of the detections."""
    params = frame.params
    fig, (ax_top, ax_hist) = plt.subplots(1, 2, figsize=(10, 4), gridspec_kw={"width_ratios": [2, 1]})

    ax_top.axvline(0.0, color="#333333", linewidth=3)
    ax_top.axvline(params.screen_distance, color="#999999", linewidth=2)
    if frame.moving_particles:
        moving = np.array([p.position for p in frame.moving_particles])
        ax_top.scatter(moving[:, 0], moving[:, 2], s=6, color="orange")
    if frame.visible_particles:
        landed = np.array([p.position for p in frame.visible_particles])
        ax_top.scatter(landed[:, 0], landed[:, 2], s=4, color="gold")
    ax_top.set_xlim(-0.5, params.screen_distance + 0.5)
    ax_top.set_ylim(-SCREEN_WIDTH / 2.0, SCREEN_WIDTH / 2.0)
    ax_top.set_xlabel("x (μm)")
    ax_top.set_ylabel("z (μm)")
    ax_top.set_title(f"{len(frame.visible_particles)} / {frame.population_size} detections")

    edges = np.linspace(-SCREEN_WIDTH / 2.0, SCREEN_WIDTH / 2.0, int(bins) + 1)
    hits = [p.position[2] for p in frame.visible_particles]
    counts, _ = np.histogram(hits, bins=edges)
    centres = 0.5 * (edges[:-1] + edges[1:])
    ax_hist.barh(centres, counts, height=edges[1] - edges[0], color="gold")

    # expected counts for the same number of detections
    z = np.linspace(edges[0], edges[-1], 600)
    expected = intensity_profile(z, params)
    area = expected.sum() * (z[1] - z[0])
    if hits and area > 0:
        ax_hist.plot(expected / area * len(hits) * (edges[1] - edges[0]), z, color="cyan")
    ax_hist.set_ylim(edges[0], edges[-1])
    ax_hist.set_xlabel("Count")
    ax_hist.set_yticks([])
    fig.tight_layout()
    return fig


__all__ = ["plot_intensity", "plot_wave_field", "plot_detections"]
