"""Pure rendering of an ``AppState`` into a view tree.

Nothing here touches the network or mutates state; the same snapshot always
renders to the same view.
"""

from dataclasses import dataclass

from ..models import describe
from .state import AppState


@dataclass(frozen=True)
class ListRow:
    index: int
    label: str


@dataclass(frozen=True)
class WheelSlice:
    index: int
    name: str
    angle: float


@dataclass(frozen=True)
class View:
    rows: tuple[ListRow, ...]
    slices: tuple[WheelSlice, ...]
    rotation: float
    selected_person: str
    preference_display: str
    can_spin: bool
    toasts: tuple[str, ...]


def render(state: AppState) -> View:
    """Build the list and wheel views from scratch for ``state``."""
    prefs = state.preferences
    slice_angle = 360 / len(prefs) if prefs else 0.0

    rows = tuple(ListRow(index=i, label=describe(p)) for i, p in enumerate(prefs))
    slices = tuple(WheelSlice(index=i, name=p.name, angle=i * slice_angle) for i, p in enumerate(prefs))

    return View(
        rows=rows,
        slices=slices,
        rotation=state.current_rotation,
        selected_person=state.selected_person,
        preference_display=state.preference_display,
        can_spin=not state.is_spinning and bool(prefs),
        toasts=tuple(state.toasts),
    )


def to_text(view: View) -> str:
    """Plain-text rendering for the terminal front-end."""
    lines = ["=== Tea Preferences ==="]
    if view.rows:
        lines.extend(f"  [{row.index}] {row.label}" for row in view.rows)
    else:
        lines.append("  (nobody yet)")

    lines.append("")
    lines.append(f"=== Wheel (rotation {view.rotation % 360:.0f}deg) ===")
    for s in view.slices:
        lines.append(f"  {s.angle:6.1f}deg  {s.name}")

    lines.append("")
    lines.append(f"Tea maker: {view.selected_person}")
    if view.preference_display:
        lines.append(view.preference_display)
    if not view.can_spin:
        lines.append("(spin unavailable)")

    for i, message in enumerate(view.toasts):
        lines.append(f"! [{i}] {message}")
    return "\n".join(lines)
