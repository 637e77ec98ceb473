"""Single-player wrap-around snake with growing, drifting obstacles."""

__version__ = "1.0.0"
