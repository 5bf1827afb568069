####### Imports #######

import logging
import numpy as np
from typing import List, Tuple

from qiskit.circuit.library import XGate, YGate, ZGate, HGate, SGate, TGate
from qiskit.quantum_info import Operator

from .config import DEFAULT_STATE, ANIMATION_STEPS

logger = logging.getLogger(__name__)

BlochVector = Tuple[float, float, float]
AmplitudePair = Tuple[complex, complex]

AXES = ("x", "y", "z")
GATES = ("H", "X", "Y", "Z", "S", "T")

SQRT1_2 = 1.0 / np.sqrt(2.0)


####### Normalization & angles #######

def normalize_state(v) -> BlochVector:
    """
    Returns v / |v|. Zero-length or non-finite input falls back to (0, 0, 1).
    """
    x, y, z = (float(c) for c in v)
    r = np.sqrt(x*x + y*y + z*z)
    if not np.isfinite(r) or r == 0.0:
        logger.debug("Degenerate vector %r replaced by %r", (x, y, z), DEFAULT_STATE)
        return DEFAULT_STATE
    return (x / r, y / r, z / r)

def cartesian_to_spherical(v) -> Tuple[float, float]:
    """
    (x, y, z) -> (theta, phi) in radians.
    theta ∈ [0, π] from +z, phi ∈ [0, 2π) in the xy-plane.
    """
    x, y, z = normalize_state(v)
    theta = float(np.arccos(np.clip(z, -1.0, 1.0)))
    phi = float(np.arctan2(y, x))
    if phi < 0.0:
        phi += 2.0 * np.pi
    if phi >= 2.0 * np.pi:
        phi = 0.0
    return theta, phi

def bloch_angles_deg(v) -> Tuple[float, float]:
    theta, phi = cartesian_to_spherical(v)
    return float(np.degrees(theta)), float(np.degrees(phi))


####### Axis rotations #######

def rotate_state_about_axis(v, axis: str, deg: float) -> BlochVector:
    """
    Right-handed rotation of (x, y, z) about a coordinate axis by `deg` degrees.
    Non-finite angles rotate by zero.
    The result is not re-normalized; callers do that after each step.
    """
    if axis not in AXES:
        raise ValueError(f"axis must be one of {AXES}, got {axis!r}.")
    deg = float(deg) if np.isfinite(deg) else 0.0
    theta = np.radians(deg)
    c = float(np.cos(theta))
    s = float(np.sin(theta))
    x, y, z = (float(comp) for comp in v)

    if axis == "x":
        return (x, y*c - z*s, y*s + z*c)
    if axis == "y":
        return (x*c + z*s, y, -x*s + z*c)
    return (x*c - y*s, x*s + y*c, z)


####### Amplitudes <-> Bloch vector #######

def vector_to_amplitudes(v) -> AmplitudePair:
    """
    |ψ⟩ = cos(θ/2)|0⟩ + e^{iφ} sin(θ/2)|1⟩, global phase fixed so alpha is real.
    """
    theta, phi = cartesian_to_spherical(v)
    alpha = complex(np.cos(theta/2.0), 0.0)
    beta = complex(np.sin(theta/2.0) * np.cos(phi), np.sin(theta/2.0) * np.sin(phi))
    return alpha, beta

def amplitudes_to_vector(alpha: complex, beta: complex) -> BlochVector:
    """
    Returns (⟨X⟩, ⟨Y⟩, ⟨Z⟩) for alpha|0⟩ + beta|1⟩, normalized.
    """
    a_re, a_im = float(np.real(alpha)), float(np.imag(alpha))
    b_re, b_im = float(np.real(beta)), float(np.imag(beta))

    x = 2.0 * (a_re*b_re + a_im*b_im)
    y = 2.0 * (a_re*b_im - a_im*b_re)
    z = a_re*a_re + a_im*a_im - b_re*b_re - b_im*b_im
    return normalize_state((x, y, z))


####### Gates application #######

def apply_gate_to_amplitudes(alpha: complex, beta: complex, gate: str) -> AmplitudePair:
    """Closed-form single-qubit gates. Unknown tokens leave (alpha, beta) unchanged."""
    alpha, beta = complex(alpha), complex(beta)
    if gate == "H":
        return (alpha + beta) * SQRT1_2, (alpha - beta) * SQRT1_2
    if gate == "X":
        return beta, alpha
    if gate == "Y":
        # (i·beta, -i·alpha): Y up to a global phase of -1
        return complex(-beta.imag, beta.real), complex(alpha.imag, -alpha.real)
    if gate == "Z":
        return alpha, -beta
    if gate == "S":
        return alpha, complex(-beta.imag, beta.real)
    if gate == "T":
        return alpha, complex((beta.real - beta.imag) * SQRT1_2, (beta.real + beta.imag) * SQRT1_2)
    logger.debug("Unknown gate token %r treated as identity", gate)
    return alpha, beta

def apply_gate_to_vector(v, gate: str) -> BlochVector:
    alpha, beta = vector_to_amplitudes(v)
    alpha, beta = apply_gate_to_amplitudes(alpha, beta, gate)
    return amplitudes_to_vector(alpha, beta)


####### Gate operators #######

GATE_OPERATORS = {
    "H": Operator(HGate()),
    "X": Operator(XGate()),
    "Y": Operator(YGate()),
    "Z": Operator(ZGate()),
    "S": Operator(SGate()),
    "T": Operator(TGate()),
}
I = Operator(np.eye(2, dtype=complex))

def gate_operator(gate: str) -> Operator:
    """qiskit Operator for a gate token, identity for unknown tokens."""
    return GATE_OPERATORS.get(gate, I)

def rm_global_phase(op: Operator) -> Operator:
    """removes the global phase of the gate : returns U / sqrt(det(U)) as an Operator."""
    U = np.asarray(op.data, dtype=complex)
    det = np.linalg.det(U)
    if np.isclose(det, 0.0):
        return Operator(U)
    return Operator(U / det**0.5)

def unitary_to_axis_angle(op: Operator) -> Tuple[np.ndarray, float]:
    """
    U ∈ U(2) -> (n, theta) such as U ≈ exp(-i * theta/2 * n·σ), theta ∈ [0, π].
    On the Bloch sphere U is a right-handed rotation by theta about n.
    """
    U = np.asarray(rm_global_phase(op).data, dtype=complex)

    c = np.clip(np.real(np.trace(U)) / 2.0, -1.0, 1.0)
    theta = 2.0 * np.arccos(c)

    s = np.sin(theta / 2.0)
    if np.isclose(s, 0.0, atol=1e-12):
        return np.array([0.0, 0.0, 1.0]), 0.0

    nx = -np.imag(U[0, 1] + U[1, 0]) / (2.0 * s)
    ny = np.real(U[1, 0] - U[0, 1]) / (2.0 * s)
    nz = np.imag(U[1, 1] - U[0, 0]) / (2.0 * s)
    n = np.array([nx, ny, nz], dtype=float)
    n = n / np.linalg.norm(n)

    # sqrt(det) picks U or -U; take the short way round
    if theta > np.pi:
        theta = 2.0 * np.pi - theta
        n = -n
    return n, float(theta)


####### Continuous trajectories #######

def rotate_about_unit_axis(v, n, theta: float) -> BlochVector:
    """Rodrigues rotation of v about the unit vector n by theta radians."""
    v = np.asarray(v, dtype=float)
    n = np.asarray(n, dtype=float)
    c, s = np.cos(theta), np.sin(theta)
    out = v*c + np.cross(n, v)*s + n*np.dot(n, v)*(1.0 - c)
    return normalize_state(out)

def gate_path(v, gate: str, steps: int = ANIMATION_STEPS) -> List[BlochVector]:
    """
    Points from v to apply_gate_to_vector(v, gate), following the gate's
    rotation on the sphere in `steps` equal increments.
    """
    if steps < 1:
        raise ValueError("steps must be >= 1.")
    start = normalize_state(v)
    n, theta = unitary_to_axis_angle(gate_operator(gate))
    dtheta = theta / steps
    return [start] + [rotate_about_unit_axis(start, n, k * dtheta) for k in range(1, steps + 1)]

def rotation_path(v, axis: str, deg: float, steps: int = ANIMATION_STEPS) -> List[BlochVector]:
    """Points from v to the rotation of v about `axis` by `deg` degrees."""
    if steps < 1:
        raise ValueError("steps must be >= 1.")
    point = normalize_state(v)
    points = [point]
    ddeg = float(deg) / steps
    for _ in range(steps):
        point = normalize_state(rotate_state_about_axis(point, axis, ddeg))
        points.append(point)
    return points
