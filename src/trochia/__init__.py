"""
Trochia: Orbital Element and Cartesian State Conversions

A Python package for converting the state of gravitationally bound bodies
between Cartesian position/velocity vectors and Keplerian orbital elements,
with a bounded-cost Kepler Equation solver.
"""

# Core classes
from .vector import Vector3
from .state import CartesianState
from .orbital_elements import OrbitalElements, OrbitalElements as OE
from .body import Body, Frame

# Conversions
from .kepler import solve_kepler, sincos
from .conversions import elements_from_state, state_from_elements
from .batch import (
    convert_bodies, to_elements, to_states,
    to_dataframe, from_dataframe,
    Direction, ErrorPolicy, BatchResult,
)

# Errors
from .errors import (
    ConversionError, InvalidGeometryError,
    InvalidElementsError, InvalidIndexError,
)

# Configuration and constants
from .config import config, temp_config
from .constants import GAUSS_K, GAUSS_K2

# Package metadata
__version__ = "0.1.0"

# Define what gets imported with "from trochia import *"
__all__ = [
    # Classes
    "Vector3",
    "CartesianState",
    "OrbitalElements",
    "Body",
    "Frame",
    "Direction",
    "ErrorPolicy",
    "BatchResult",
    # Abbreviations
    "OE",
    # Functions
    "solve_kepler",
    "sincos",
    "elements_from_state",
    "state_from_elements",
    "convert_bodies",
    "to_elements",
    "to_states",
    "to_dataframe",
    "from_dataframe",
    # Errors
    "ConversionError",
    "InvalidGeometryError",
    "InvalidElementsError",
    "InvalidIndexError",
    # Configuration
    "config",
    "temp_config",
    # Constants
    "GAUSS_K",
    "GAUSS_K2",
]
