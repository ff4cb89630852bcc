# Seconds each frame of a solution stays on screen.
DEFAULT_DELAY = 2.0
