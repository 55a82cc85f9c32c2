from dataclasses import dataclass


@dataclass(slots=True)
class CountdownTimer:
    """Per-level one-second countdown switch.

    running: False once stopped; stopping twice is harmless.
    """
    running: bool = False
