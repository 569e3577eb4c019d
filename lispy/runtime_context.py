from __future__ import annotations

# NOTE: For now this is process-global. Evaluation is single-threaded; if
# threading is introduced, switch to contextvars or threading.local.
_depth: int = 0


def enter_evaluation() -> int:
    """Increment the nesting depth and return the new value."""
    global _depth
    _depth += 1
    return _depth


def exit_evaluation() -> None:
    global _depth
    _depth -= 1


def get_depth() -> int:
    return _depth


def reset_depth() -> None:
    global _depth
    _depth = 0
