"""Length unit conversion."""

__all__ = ["LENGTH_UNITS", "scale", "convert"]

LENGTH_UNITS = {
    "m": 1.0,
    "cm": 1e-2,
    "mm": 1e-3,
    "um": 1e-6,
    "nm": 1e-9,
}


def scale(unit: str) -> float:
    """Number of metres in one `unit`."""
    try:
        return LENGTH_UNITS[unit]
    except KeyError:
        raise ValueError(
            f"Unknown length unit: {unit!r}. Use one of {list(LENGTH_UNITS)}"
        ) from None


def convert(value, from_: str, to: str):
    """Convert a length (scalar or array) between units.

    Example:
        >>> convert(2.5e-6, "m", "um")
        2.5
    """
    if from_ == to:
        return value
    return value * (scale(from_) / scale(to))
