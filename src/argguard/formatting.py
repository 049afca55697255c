"""Rendering helpers used when building failure messages.

Both helpers must never raise: they run while an error is already being
reported, often on values that just failed validation.
"""

import reprlib
import traceback
import typing

from argguard.config import current_settings


def safe_repr(value: typing.Any) -> str:
    """Render ``value`` for display, bounded in size and safe on cycles.

    ``reprlib`` limits nesting depth, which also terminates self-referencing
    containers, and falls back to a generic placeholder when an object's own
    ``__repr__`` raises.
    """
    settings = current_settings()
    renderer = reprlib.Repr(
        maxlevel=settings.repr_max_level,
        maxstring=settings.repr_max_string,
        maxother=settings.repr_max_string,
        maxdict=32,
        maxlist=32,
        maxtuple=32,
        maxset=32,
    )
    try:
        return renderer.repr(value)
    except Exception:  # noqa: BLE001
        return f"<unrepresentable {type(value).__name__}>"


def capture_stack(skip: int = 1) -> str | None:
    """Capture the current call stack as text, or None when disabled.

    Args:
        skip: Innermost frames to drop so the stack ends at the caller of
            the validation machinery rather than inside it.
    """
    settings = current_settings()
    if not settings.capture_stack:
        return None
    frames = traceback.extract_stack()[: -(skip + 1)]
    frames = frames[-settings.stack_limit :]
    return "".join(traceback.format_list(frames)).rstrip()
