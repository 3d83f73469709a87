"""
Body record used by batch conversions.

A list of Body objects is a snapshot of a system; list indices identify the
bodies and designate the central body of a conversion.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np

from .orbital_elements import OrbitalElements
from .state import CartesianState


# define an enumerated list of Cartesian frames a body carries
class Frame(Enum):
    BARYCENTRIC = 'bco'     # origin at the system center of mass
    HELIOCENTRIC = 'hco'    # origin at the central body


@dataclass
class Body:
    """
    Mutable coordinate record for one celestial object.

    Attributes
    ----------
    mass : float
        Mass [solar masses], zero for test particles
    bco : CartesianState
        Barycentric position/velocity
    hco : CartesianState
        Heliocentric position/velocity
    hel : OrbitalElements
        Heliocentric Keplerian elements
    name : str, optional
        Identifier
    """
    mass: float = 0.0
    bco: CartesianState = field(default_factory=CartesianState.zero)
    hco: CartesianState = field(default_factory=CartesianState.zero)
    hel: OrbitalElements = field(default_factory=OrbitalElements.zero)
    name: Optional[str] = None

    def __post_init__(self):
        #Validate parameters
        if not np.isfinite(self.mass) or self.mass < 0:
            raise ValueError(f"Mass must be non-negative and finite, got {self.mass}")
        self.mass = float(self.mass)

    def state(self, frame) -> CartesianState:
        """Cartesian state stored for the given frame"""
        return getattr(self, parse_frame(frame).value)

    def set_state(self, frame, state: CartesianState):
        """Replace the Cartesian state stored for the given frame"""
        if not isinstance(state, CartesianState):
            raise TypeError(f"state must be CartesianState, got {type(state)}")
        setattr(self, parse_frame(frame).value, state)


def parse_frame(frame):
    """Convert string or enum to Frame enum"""
    if isinstance(frame, Frame):
        return frame
    elif isinstance(frame, str):
        type_map = {
            'bco': Frame.BARYCENTRIC,
            'barycentric': Frame.BARYCENTRIC,
            'hco': Frame.HELIOCENTRIC,
            'heliocentric': Frame.HELIOCENTRIC,
        }
        if frame in type_map:
            return type_map[frame]
        else:
            raise ValueError(f"Unknown frame '{frame}'. "
                             f"Use: {list(type_map.keys())}")
    else:
        raise TypeError(f"frame must be Frame or str, got {type(frame)}")
