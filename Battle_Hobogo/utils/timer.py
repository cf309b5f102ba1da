"""Per-move deadlines; a deadline of None means no limit."""

import time


def deadline_after(seconds):
    if seconds is None or seconds <= 0:
        return None
    return time.time() + seconds


def expired(deadline):
    return deadline is not None and time.time() > deadline
