# examples/example_1qubit.py
# Minimal usage demo: drive a session the way the control panel does, then draw it.

import matplotlib
import matplotlib.pyplot as plt
from bloch_state import (
    BlochSession, AxisControl,
    gate_path, plot_state, animate_trajectory,
    configure_logging,
)

matplotlib.use("Qt5Agg")
configure_logging("INFO")

# --- session & sliders ---
session = BlochSession()
rx, ry, rz = (AxisControl(a, session) for a in "xyz")

# --- actions ---
session.apply_gate("H")          # |0⟩ -> |+⟩
rz.apply_angle(90)               # |+⟩ -> |+i⟩
session.apply_gate("S")          # |+i⟩ -> |−⟩
ry.apply_angle(-45)
session.set_named_state("|1⟩")   # sliders go back to zero
session.apply_gate("T")

snap = session.snapshot()
print(f"state = ({snap.x:.4f}, {snap.y:.4f}, {snap.z:.4f})  "
      f"θ = {snap.theta_deg:.2f}°  φ = {snap.phi_deg:.2f}°  |r| = {snap.radius:.4f}")
print(f"last operation: {snap.last_action}")

# --- drawing ---
plot_state(session.state)
anim_history = animate_trajectory(session.history, interval_ms=400)
anim_h = animate_trajectory(gate_path((0, 0, 1), "H", steps=60), interval_ms=20)
plt.show()
