####### Imports #######

import numpy as np
from typing import Iterable, Optional, Tuple
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from .bloch_state_1_qbit import normalize_state, bloch_angles_deg
from .config import ANIMATION_INTERVAL_MS


####### Sphere #######

def draw_sphere(ax) -> None:
    """Translucent unit sphere with labelled X, Y, Z axes on a 3d Axes."""
    u = np.linspace(0, 2*np.pi, 60)
    v = np.linspace(0, np.pi, 30)
    xs = np.outer(np.cos(u), np.sin(v))
    ys = np.outer(np.sin(u), np.sin(v))
    zs = np.outer(np.ones_like(u), np.cos(v))
    ax.plot_surface(xs, ys, zs, alpha=0.12, linewidth=0)

    # Axis
    ax.plot([-1,1],[0,0],[0,0]); ax.text(1.1,0,0,"X")
    ax.plot([0,0],[-1,1],[0,0]); ax.text(0,1.1,0,"Y")
    ax.plot([0,0],[0,0],[-1,1]); ax.text(0,0,1.1,"Z")
    ax.set_xlim([-1,1]); ax.set_ylim([-1,1]); ax.set_zlim([-1,1])
    ax.set_box_aspect([1,1,1])
    ax.set_xlabel("X"); ax.set_ylabel("Y"); ax.set_zlabel("Z")


####### Static state #######

def plot_state(state, ax=None, title: Optional[str] = None):
    """Draws the state arrow from the origin. Returns the Axes."""
    if ax is None:
        fig = plt.figure(figsize=(5,5))
        ax = fig.add_subplot(111, projection="3d")
    draw_sphere(ax)

    x, y, z = normalize_state(state)
    ax.quiver(0, 0, 0, x, y, z, color="red", linewidth=2, arrow_length_ratio=0.1)
    if title is None:
        theta_deg, phi_deg = bloch_angles_deg((x, y, z))
        title = f"θ = {theta_deg:.2f}°, φ = {phi_deg:.2f}°"
    ax.set_title(title)
    return ax


####### Animation #######

def animate_trajectory(points: Iterable[Tuple[float, float, float]],
                       interval_ms: int = ANIMATION_INTERVAL_MS,
                       show_trail: bool = True) -> FuncAnimation:
    pts = np.asarray(list(points), dtype=float)
    if pts.size == 0:
        raise ValueError("List 'points' is empty.")
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise ValueError("`points` must have shape (N, 3).")

    fig = plt.figure(figsize=(5,5))
    ax = fig.add_subplot(111, projection="3d")
    draw_sphere(ax)

    # Animated elements
    scat = ax.scatter([pts[0,0]], [pts[0,1]], [pts[0,2]], s=50, c="red")
    line, = ax.plot([], [], [], linewidth=1.5, alpha=0.7)

    def update(i):
        x,y,z = pts[i]
        scat._offsets3d = ([x], [y], [z])
        if show_trail:
            Xs, Ys, Zs = pts[:i+1,0], pts[:i+1,1], pts[:i+1,2]
            line.set_data(Xs, Ys); line.set_3d_properties(Zs)
        ax.set_title(f"Frame {i+1}/{len(pts)}")
        return scat, line

    anim = FuncAnimation(fig, update, frames=len(pts), interval=interval_ms, blit=False, repeat=True)
    return anim
