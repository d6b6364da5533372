"""Application state mirrored by the client."""

from dataclasses import dataclass, field

from ..models import Preference

NOBODY_SELECTED = "Nobody selected yet"


@dataclass
class AppState:
    """Everything the client knows between round trips to the server.

    ``preferences`` is only ever replaced wholesale with what the server
    returned. ``current_rotation`` accumulates across spins and is never
    reset, so the wheel always turns forward.
    """

    preferences: list[Preference] = field(default_factory=list)
    is_spinning: bool = False
    current_rotation: float = 0.0
    selected_person: str = NOBODY_SELECTED
    preference_display: str = ""
    toasts: list[str] = field(default_factory=list)

    def replace_preferences(self, prefs: list[Preference]) -> None:
        self.preferences = list(prefs)

    def reset_selection(self) -> None:
        self.selected_person = NOBODY_SELECTED
        self.preference_display = ""

    def add_toast(self, message: str) -> None:
        self.toasts.append(message)

    def dismiss_toast(self, position: int = 0) -> str | None:
        """Remove and return a pending toast, or None if there is none there."""
        if 0 <= position < len(self.toasts):
            return self.toasts.pop(position)
        return None
