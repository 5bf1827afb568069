"""
Public API for the bloch_state package.

This module re-exports the most useful names from:
- bloch_state_1_qbit.py (normalization, rotations, amplitudes, gates)
- session.py (interactive session and axis controls)
- animation.py (matplotlib rendering)

So examples (and users) can simply:
    from bloch_state import BlochSession, apply_gate_to_vector, animate_trajectory, ...
"""

# ----- core engine -----
from .bloch_state_1_qbit import (
    # types / tokens
    BlochVector, AmplitudePair, AXES, GATES,

    # normalization & angles
    normalize_state,
    cartesian_to_spherical,
    bloch_angles_deg,

    # rotations
    rotate_state_about_axis,

    # amplitudes
    vector_to_amplitudes,
    amplitudes_to_vector,

    # gates
    apply_gate_to_amplitudes,
    apply_gate_to_vector,
    gate_operator,
    rm_global_phase,
    unitary_to_axis_angle,

    # transitions
    rotate_about_unit_axis,
    gate_path,
    rotation_path,
)

# ----- session -----
from .session import (
    BlochSession,
    StateSnapshot,
    AxisControl,
    NAMED_STATES,
)

# ----- rendering -----
from .animation import (
    draw_sphere,
    plot_state,
    animate_trajectory,
)

from .config import configure_logging

__all__ = [
    "BlochVector", "AmplitudePair", "AXES", "GATES",
    "normalize_state", "cartesian_to_spherical", "bloch_angles_deg",
    "rotate_state_about_axis", "vector_to_amplitudes", "amplitudes_to_vector",
    "apply_gate_to_amplitudes", "apply_gate_to_vector", "gate_operator",
    "rm_global_phase", "unitary_to_axis_angle",
    "rotate_about_unit_axis", "gate_path", "rotation_path",

    "BlochSession", "StateSnapshot", "AxisControl", "NAMED_STATES",

    "draw_sphere", "plot_state", "animate_trajectory",

    "configure_logging",
]
