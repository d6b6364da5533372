"""Client side of Tea Roulette: API wrapper, state, rendering and spin logic."""

from .api import ClientNetworkError, PreferencesClient
from .controller import UIController
from .render import ListRow, View, WheelSlice, render, to_text
from .spin import SpinController, SpinResult
from .state import NOBODY_SELECTED, AppState

__all__ = [
    "AppState",
    "ClientNetworkError",
    "ListRow",
    "NOBODY_SELECTED",
    "PreferencesClient",
    "SpinController",
    "SpinResult",
    "UIController",
    "View",
    "WheelSlice",
    "render",
    "to_text",
]
