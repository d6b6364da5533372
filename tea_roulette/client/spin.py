"""Spin controller: picks the tea maker and drives the wheel rotation."""

import logging
import random
import threading
from dataclasses import dataclass
from typing import Callable

from ..models import Preference, summarize
from .state import AppState

logger = logging.getLogger(__name__)

FULL_TURN = 360

Scheduler = Callable[[float, Callable[[], None]], None]


@dataclass(frozen=True)
class SpinResult:
    """Outcome of one spin, known as soon as it starts."""

    index: int
    winner: Preference
    target_rotation: float
    rotation: float


def start_timer(delay: float, callback: Callable[[], None]) -> None:
    """Default scheduler: run ``callback`` on a daemon timer thread."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()


def target_rotation(index: int, count: int, extra_spins: int = 6) -> float:
    """Degrees to add to the wheel so it lands on slice ``index``.

    Six extra full turns for show, the slice offset, and one more full turn
    so the landing accounts for the direction of rotation.
    """
    slice_angle = FULL_TURN / count
    return extra_spins * FULL_TURN + index * slice_angle + FULL_TURN


class SpinController:
    """Idle/Spinning state machine over an ``AppState``.

    The reveal always fires after ``duration`` seconds; there is no way to
    cancel a spin once started.
    """

    def __init__(
        self,
        state: AppState,
        duration: float = 3.0,
        extra_spins: int = 6,
        rng: random.Random | None = None,
        schedule: Scheduler | None = None,
        on_reveal: Callable[[SpinResult], None] | None = None,
    ):
        self.state = state
        self.duration = duration
        self.extra_spins = extra_spins
        self.rng = rng or random.Random()
        self.schedule = schedule or start_timer
        self.on_reveal = on_reveal

    def spin(self) -> SpinResult | None:
        """Start a spin, or do nothing if already spinning or nobody is registered."""
        state = self.state
        if state.is_spinning or not state.preferences:
            logger.debug("Spin ignored: already spinning or no preferences")
            return None

        state.is_spinning = True
        count = len(state.preferences)
        index = self.rng.randrange(count)
        # Captured now so the reveal matches where the wheel lands
        winner = state.preferences[index]

        target = target_rotation(index, count, self.extra_spins)
        state.current_rotation += target
        result = SpinResult(index=index, winner=winner, target_rotation=target, rotation=state.current_rotation)
        logger.info(f"Spinning to index {index} of {count} (rotation {state.current_rotation:.1f}deg)")

        self.schedule(self.duration, lambda: self._reveal(result))
        return result

    def _reveal(self, result: SpinResult) -> None:
        self.state.is_spinning = False
        self.state.selected_person = result.winner.name
        self.state.preference_display = summarize(result.winner)
        logger.info(f"Tea maker: {result.winner.name}")
        if self.on_reveal is not None:
            self.on_reveal(result)
