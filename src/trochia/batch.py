"""
Batch Conversion
================

Convert every body of a system snapshot relative to a designated central
body. The gravitational parameter of each two-body problem is
mu = G * (M_center + m_i).

The central body's output field is set to the all-zero value. What happens
when an individual body cannot be converted is controlled by an
ErrorPolicy: RAISE aborts the batch, SKIP warns and leaves that body's
previous output in place.

Examples
--------
>>> from trochia import to_elements, to_states
>>> from trochia.defaults import outer_solar_system
>>> bodies = outer_solar_system()
>>> to_states(bodies, center=0)        # hel -> hco
>>> result = to_elements(bodies, center=0, policy='skip')
>>> result.ok
True
"""

import logging
import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence

import numpy as np

from .body import Body, parse_frame
from .config import config
from .conversions import elements_from_state, state_from_elements
from .errors import ConversionError, InvalidIndexError
from .orbital_elements import OrbitalElements
from .state import CartesianState

logger = logging.getLogger(__name__)


class Direction(Enum):
    TO_ELEMENTS = 'elements'    # Cartesian frame -> hel
    TO_STATE = 'state'          # hel -> Cartesian frame


class ErrorPolicy(Enum):
    RAISE = 'raise'
    SKIP = 'skip'


@dataclass
class BatchResult:
    """
    Outcome of a batch conversion.

    Attributes
    ----------
    converted : list of int
        Indices whose output field was written (central body included)
    failures : dict
        Index -> exception for bodies skipped under ErrorPolicy.SKIP
    """
    converted: List[int] = field(default_factory=list)
    failures: Dict[int, Exception] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True if no body failed"""
        return not self.failures

    def __len__(self):
        return len(self.converted)


def _parse_enum(value, enum_class, name):
    if isinstance(value, enum_class):
        return value
    try:
        return enum_class(value)
    except ValueError:
        raise ValueError(f"Unknown {name} '{value}'. "
                         f"Use: {[m.value for m in enum_class]}") from None


def _check_center(bodies, center):
    if isinstance(center, (bool, np.bool_)) or not isinstance(center, (int, np.integer)):
        raise InvalidIndexError(f"Center index must be an integer, got {center!r}")
    if not 0 <= center < len(bodies):
        raise InvalidIndexError(
            f"Center index {center} out of range for {len(bodies)} bodies")


def convert_bodies(
    bodies: Sequence[Body],
    center: int,
    direction,
    frame='hco',
    policy=None,
    G=None,
) -> BatchResult:
    """
    Convert all bodies between Cartesian state and orbital elements in place.

    Parameters
    ----------
    bodies : sequence of Body
        System snapshot; modified in place
    center : int
        Index of the central body, 0 <= center < len(bodies)
    direction : Direction or str
        'elements' (read ``frame``, write ``hel``) or
        'state' (read ``hel``, write ``frame``)
    frame : Frame or str, optional
        Cartesian field to read or write (default 'hco')
    policy : ErrorPolicy or str, optional
        Per-body failure handling. Defaults to config.BATCH_ERROR_POLICY
    G : float, optional
        Gravitational constant. Defaults to config.GRAVITATIONAL_CONSTANT

    Returns
    -------
    BatchResult

    Raises
    ------
    InvalidIndexError
        If center does not address a body
    ConversionError
        Under ErrorPolicy.RAISE, for the first body that fails. Bodies
        before it have already been converted.
    """
    return _convert(bodies, center, direction, frame, policy, G)


def _convert(bodies, center, direction, frame, policy, G):
    # RuntimeWarnings point at the caller of convert_bodies or a shortcut
    _check_center(bodies, center)
    direction = _parse_enum(direction, Direction, 'direction')
    policy = _parse_enum(config.BATCH_ERROR_POLICY if policy is None else policy,
                         ErrorPolicy, 'error policy')
    frame = parse_frame(frame)
    if G is None:
        G = config.GRAVITATIONAL_CONSTANT

    result = BatchResult()
    central = bodies[center]

    # central body is the origin of the two-body problems
    if direction == Direction.TO_ELEMENTS:
        central.hel = OrbitalElements.zero()
    else:
        central.set_state(frame, CartesianState.zero())
    result.converted.append(center)

    for i, body in enumerate(bodies):
        if i == center:
            continue

        mu = G * (central.mass + body.mass)
        try:
            if direction == Direction.TO_ELEMENTS:
                body.hel = elements_from_state(body.state(frame), mu)
            else:
                body.set_state(frame, state_from_elements(body.hel, mu))
        except ConversionError as err:
            label = _label(i, body)
            if policy == ErrorPolicy.RAISE:
                raise type(err)(f"{label}: {err}") from err
            logger.debug("Skipping %s: %s", label, err)
            warnings.warn(f"{label} not converted, previous value kept: {err}",
                          RuntimeWarning, stacklevel=3)
            result.failures[i] = err
            continue
        result.converted.append(i)

    logger.debug("Converted %d of %d bodies to %s (center %d, %d skipped)",
                 len(result.converted), len(bodies), direction.value,
                 center, len(result.failures))
    return result


def _label(index, body):
    if body.name:
        return f"Body {index} ({body.name})"
    return f"Body {index}"


# conversion shortcuts for convenience
def to_elements(bodies, center, frame='hco', policy=None, G=None):
    """Shortcut for convert_bodies(..., Direction.TO_ELEMENTS)"""
    return _convert(bodies, center, Direction.TO_ELEMENTS, frame, policy, G)


def to_states(bodies, center, frame='hco', policy=None, G=None):
    """Shortcut for convert_bodies(..., Direction.TO_STATE)"""
    return _convert(bodies, center, Direction.TO_STATE, frame, policy, G)


# ========== TABULAR INTERCHANGE ==========
_ELEMENT_COLUMNS = ['sma', 'ecc', 'inc', 'aph', 'lan', 'man']
_STATE_COLUMNS = ['x', 'y', 'z', 'vx', 'vy', 'vz']


def to_dataframe(bodies, kind='hel', index=None):
    """
    Convert a list of bodies to a pandas DataFrame.

    Parameters
    ----------
    bodies : sequence of Body
    kind : str, optional
        'hel' for orbital elements, 'hco' or 'bco' for a Cartesian frame
    index : array-like, optional
        Index for the DataFrame (e.g. body names).
        If None, uses integer index.

    Returns
    -------
    pd.DataFrame
        Columns sma, ecc, inc, aph, lan, man (or x, y, z, vx, vy, vz),
        followed by mass

    Raises
    ------
    ValueError
        If index length doesn't match number of bodies
    """
    import pandas as pd

    if index is not None and len(index) != len(bodies):
        raise ValueError(
            f"Index length ({len(index)}) must match "
            f"number of bodies ({len(bodies)})"
        )

    if kind == 'hel':
        columns = _ELEMENT_COLUMNS
        rows = [b.hel.to_numpy() for b in bodies]
    else:
        frame = parse_frame(kind)
        columns = _STATE_COLUMNS
        rows = [b.state(frame).to_numpy() for b in bodies]

    data = np.array(rows).reshape(len(bodies), 6)
    df = pd.DataFrame(data, columns=columns, index=index)
    df['mass'] = [b.mass for b in bodies]
    return df


def from_dataframe(df, kind=None):
    """
    Create a list of bodies from a pandas DataFrame.

    Parameters
    ----------
    df : pd.DataFrame
        One row per body, with a 'mass' column and either element columns
        (sma, ecc, inc, aph, lan, man) or state columns (x, y, z, vx, vy, vz)
    kind : str, optional
        'hel', 'hco' or 'bco'. If None, inferred from column names;
        state columns are read into 'hco'.

    Returns
    -------
    list of Body
        Elements are stored without validation, so the central body's zero
        row is accepted.
    """
    import pandas as pd

    cols = set(df.columns)
    if 'mass' not in cols:
        raise ValueError("DataFrame requires a 'mass' column")

    if kind is None:
        if set(_ELEMENT_COLUMNS) <= cols:
            kind = 'hel'
        elif set(_STATE_COLUMNS) <= cols:
            kind = 'hco'
        else:
            raise ValueError(
                "Could not infer coordinate kind from columns. "
                "Provide kind explicitly."
            )

    if pd.api.types.is_numeric_dtype(df.index):
        names = [None] * len(df)
    else:
        names = [str(i) for i in df.index]
    bodies = []
    if kind == 'hel':
        values = df[_ELEMENT_COLUMNS].to_numpy(dtype=float)
        for row, mass, name in zip(values, df['mass'], names):
            bodies.append(Body(mass=mass, hel=OrbitalElements(row, validate=False), name=name))
    else:
        frame = parse_frame(kind)
        values = df[_STATE_COLUMNS].to_numpy(dtype=float)
        for row, mass, name in zip(values, df['mass'], names):
            body = Body(mass=mass, name=name)
            body.set_state(frame, CartesianState.from_array(row))
            bodies.append(body)
    return bodies
