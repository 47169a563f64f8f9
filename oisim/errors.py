"""Exceptions and warnings raised by the optical image pipeline."""

__all__ = [
    "OisimError",
    "InvalidOpticsConfiguration",
    "EmptyInputError",
    "UnsupportedOffAxisMethod",
    "UnsupportedDiffuserMethod",
]


class OisimError(Exception):
    """Base class for oisim errors."""


class InvalidOpticsConfiguration(OisimError, ValueError):
    """Raised when the optics cannot describe a physical lens.

    Covers non-positive f-number or focal length, an unsupported optics
    model, and a source placed inside the focal length.
    """


class EmptyInputError(OisimError, ValueError):
    """Raised when a scene or optical image carries no data."""


class UnsupportedOffAxisMethod(UserWarning):
    """Unknown off-axis method; cos4th falloff is used instead."""


class UnsupportedDiffuserMethod(UserWarning):
    """Unknown diffuser method; no diffuser is applied."""
