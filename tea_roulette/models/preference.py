"""Preference model for one person's tea order."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


class Preference(BaseModel):
    """A person's name plus how they take their tea.

    Records carry no identifier; the store addresses them by position.
    Strict types mirror the JSON contract: ``sugar`` must be a real integer
    (``true`` is rejected) and ``milk`` a real boolean.
    """

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(min_length=1)
    sugar: StrictInt = Field(ge=0)
    milk: StrictBool

    def __repr__(self) -> str:
        return f"<Preference(name='{self.name}', sugar={self.sugar}, milk={self.milk})>"


def _milk_word(pref: Preference) -> str:
    return "with" if pref.milk else "without"


def describe(pref: Preference) -> str:
    """Return the list-row label, e.g. ``"Amy: 1 sugar, with milk"``."""
    return f"{pref.name}: {pref.sugar} sugar, {_milk_word(pref)} milk"


def summarize(pref: Preference) -> str:
    """Return the line shown under the winner after a spin.

    "sugar" is pluralized for every count except exactly one:

        Preferences: 0 sugars, without milk
        Preferences: 1 sugar, with milk
    """
    plural = "" if pref.sugar == 1 else "s"
    return f"Preferences: {pref.sugar} sugar{plural}, {_milk_word(pref)} milk"
