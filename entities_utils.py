# entities_utils.py


def require(condition: bool, message: str) -> None:
    """Raise ``ValueError`` with ``message`` when ``condition`` is False."""

    if not condition:
        raise ValueError(message)


def rects_overlap(a, b):
    """Return True if the axis-aligned boxes of a and b overlap (open intervals)."""
    return (a.x + a.width > b.x and a.x < b.x + b.width and
            a.y + a.height > b.y and a.y < b.y + b.height)


def spans_overlap(a_left, a_right, b_left, b_right):
    return a_right > b_left and a_left < b_right
