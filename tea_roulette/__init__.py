"""Tea Roulette: register tea preferences and spin a wheel to pick the tea maker."""

__version__ = "1.0.0"
