####### Imports #######

import logging
import threading
from collections import deque
import numpy as np
from dataclasses import dataclass
from typing import Callable, Deque, Dict, List, Optional

from .bloch_state_1_qbit import (
    AXES, BlochVector,
    normalize_state, bloch_angles_deg, rotate_state_about_axis, apply_gate_to_vector,
)
from .config import DEFAULT_STATE, ANGLE_MIN, ANGLE_MAX, HISTORY_LIMIT

logger = logging.getLogger(__name__)


####### Named states #######

NAMED_STATES: Dict[str, BlochVector] = {
    "|0⟩": (0.0, 0.0, 1.0),
    "|1⟩": (0.0, 0.0, -1.0),
    "|+⟩": (1.0, 0.0, 0.0),
    "|−⟩": (-1.0, 0.0, 0.0),
    "|+i⟩": (0.0, 1.0, 0.0),
    "|−i⟩": (0.0, -1.0, 0.0),
}


@dataclass(frozen=True)
class StateSnapshot:
    x: float
    y: float
    z: float
    theta_deg: float
    phi_deg: float
    radius: float
    reset_key: int
    last_action: str
    active_state: str

    @property
    def vector(self) -> BlochVector:
        return (self.x, self.y, self.z)


####### Session #######

class BlochSession:
    """
    Owns the current Bloch vector of one interactive session.

    Every update runs under a lock so actions apply atomically and in issue
    order. `reset_key` is bumped whenever dependent controls must go back to
    zero (reset and set-state); subscribers are called with the new key while
    the lock is held, so keys arrive in order. `history` keeps the last
    HISTORY_LIMIT states.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._state: BlochVector = DEFAULT_STATE
        self._listeners: List[Callable[[int], None]] = []
        self.reset_key = 0
        self.last_action = "System initialized"
        self.active_state = "|0⟩"
        self.history: Deque[BlochVector] = deque([self._state], maxlen=HISTORY_LIMIT)

    @property
    def state(self) -> BlochVector:
        return self._state

    def snapshot(self) -> StateSnapshot:
        with self._lock:
            x, y, z = normalize_state(self._state)
            theta_deg, phi_deg = bloch_angles_deg(self._state)
            return StateSnapshot(x, y, z, theta_deg, phi_deg, 1.0,
                                 self.reset_key, self.last_action, self.active_state)

    def subscribe(self, callback: Callable[[int], None]) -> Callable[[int], None]:
        with self._lock:
            self._listeners.append(callback)
        return callback

    def unsubscribe(self, callback: Callable[[int], None]) -> None:
        with self._lock:
            self._listeners.remove(callback)

    def _commit(self, state: BlochVector, action: str, active: str) -> None:
        self._state = state
        self.last_action = action
        self.active_state = active
        self.history.append(state)
        logger.info(action)

    def _bump_reset_key(self) -> int:
        self.reset_key += 1
        return self.reset_key

    def _notify(self, key: int) -> None:
        for callback in list(self._listeners):
            callback(key)

    # --- actions ---

    def rotate(self, axis: str, delta_deg: float) -> BlochVector:
        """Rotate about `axis` by `delta_deg` degrees. Non-finite deltas are ignored."""
        if axis not in AXES:
            raise ValueError(f"axis must be one of {AXES}, got {axis!r}.")
        delta = float(delta_deg) if np.isfinite(delta_deg) else 0.0
        with self._lock:
            if delta == 0.0:
                logger.debug("Zero rotation about %s ignored", axis)
                return self._state
            new = normalize_state(rotate_state_about_axis(normalize_state(self._state), axis, delta))
            self._commit(new, f"ROTATE: R_{axis.upper()}({delta:.0f}°)", "")
            return new

    def apply_gate(self, gate: str) -> BlochVector:
        with self._lock:
            new = apply_gate_to_vector(self._state, gate)
            self._commit(new, f"GATE APPLIED: {gate}", "")
            return new

    def set_state(self, x: float, y: float, z: float, name: Optional[str] = None) -> BlochVector:
        """Replace the state with (x, y, z), normalized."""
        with self._lock:
            new = normalize_state((x, y, z))
            label = name if name is not None else "({:.4f}, {:.4f}, {:.4f})".format(*new)
            self._commit(new, f"STATE SET: {label}", name or "")
            self._notify(self._bump_reset_key())
        return new

    def set_named_state(self, name: str) -> BlochVector:
        if name not in NAMED_STATES:
            raise KeyError(f"unknown state {name!r}, expected one of {list(NAMED_STATES)}")
        return self.set_state(*NAMED_STATES[name], name=name)

    def reset(self) -> BlochVector:
        with self._lock:
            self.history.clear()
            self._commit(DEFAULT_STATE, "SYSTEM RESET", "|0⟩")
            self._notify(self._bump_reset_key())
        return DEFAULT_STATE


####### Axis controls #######

def clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))


class AxisControl:
    """
    Headless rotation slider for one axis. The slider holds an absolute angle;
    moving it rotates the session by the difference to the previous angle.
    """

    def __init__(self, axis: str, session: BlochSession):
        if axis not in AXES:
            raise ValueError(f"axis must be one of {AXES}, got {axis!r}.")
        self.axis = axis
        self.session = session
        self.angle_deg = 0.0
        session.subscribe(self._on_reset)

    @property
    def label(self) -> str:
        return f"R_{self.axis.upper()}"

    def _on_reset(self, reset_key: int) -> None:
        self.angle_deg = 0.0

    def apply_angle(self, raw: float) -> float:
        """Move the slider to `raw` degrees; returns the delta applied to the session."""
        nxt = clamp(float(raw) if np.isfinite(raw) else 0.0, ANGLE_MIN, ANGLE_MAX)
        with self.session._lock:
            delta = nxt - self.angle_deg
            self.angle_deg = nxt
            if delta != 0.0:
                self.session.rotate(self.axis, delta)
        return delta

    def detach(self) -> None:
        self.session.unsubscribe(self._on_reset)
