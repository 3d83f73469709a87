"""
Exception types raised by the conversion routines.

Conversion failures derive from ValueError so callers that already guard
against bad numeric input keep working.
"""


class ConversionError(ValueError):
    """A single body could not be converted."""


class InvalidGeometryError(ConversionError):
    """
    Cartesian state does not describe a bound elliptic orbit
    (non-positive inverse semi-major axis, eccentricity outside [0, 1),
    or a degenerate position vector).
    """


class InvalidElementsError(ConversionError):
    """Orbital elements lie outside the supported elliptic domain."""


class InvalidIndexError(IndexError):
    """Central body index does not address the body collection."""
