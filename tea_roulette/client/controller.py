"""UI controller: owns the client state and applies user actions to it."""

import logging
from typing import Callable

from .api import ClientNetworkError, PreferencesClient
from .render import View, render
from .spin import SpinController, SpinResult
from .state import AppState

logger = logging.getLogger(__name__)


class UIController:
    """Runs user actions against the API and keeps ``state`` in step with it.

    Every successful mutating call replaces the local list with the one the
    server returned. Failures are logged and turned into toasts; they never
    propagate to the caller.
    """

    def __init__(
        self,
        client: PreferencesClient,
        state: AppState | None = None,
        spinner: SpinController | None = None,
    ):
        self.client = client
        if state is None:
            state = spinner.state if spinner is not None else AppState()
        elif spinner is not None and spinner.state is not state:
            raise ValueError("spinner must share the controller's state")
        self.state = state
        self.spinner = spinner or SpinController(state)

    def view(self) -> View:
        return render(self.state)

    def load(self) -> bool:
        try:
            prefs = self.client.fetch_all()
        except ClientNetworkError as e:
            logger.error(f"Error loading preferences: {e}")
            self.state.add_toast("Error loading preferences")
            return False
        self.state.replace_preferences(prefs)
        return True

    def add(self, name: str, sugar: int, milk: bool) -> bool:
        try:
            prefs = self.client.add(name, sugar, milk)
        except ClientNetworkError as e:
            logger.error(f"Error adding person: {e}")
            self.state.add_toast("Error adding person")
            return False
        self.state.replace_preferences(prefs)
        return True

    def remove(self, index: int) -> bool:
        if self.state.is_spinning:
            logger.debug("Remove ignored while spinning")
            return False
        try:
            prefs = self.client.remove(index)
        except ClientNetworkError as e:
            logger.error(f"Error removing person: {e}")
            self.state.add_toast("Error removing person")
            return False
        self.state.replace_preferences(prefs)
        if not prefs:
            self.state.reset_selection()
        return True

    def remove_all(self, confirm: Callable[[], bool] | None = None) -> bool:
        """Remove everybody, after ``confirm()`` agrees when one is given."""
        if self.state.is_spinning:
            logger.debug("Remove all ignored while spinning")
            return False
        if confirm is not None and not confirm():
            return False
        try:
            self.client.remove_all()
        except ClientNetworkError as e:
            logger.error(f"Error removing all people: {e}")
            self.state.add_toast("Error removing all people")
            return False
        self.state.replace_preferences([])
        self.state.reset_selection()
        return True

    def spin(self) -> SpinResult | None:
        return self.spinner.spin()

    def dismiss_toast(self, position: int = 0) -> str | None:
        return self.state.dismiss_toast(position)
