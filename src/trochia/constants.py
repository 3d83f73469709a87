"""
Numerical and Physical Constants
================================

Constants shared by the conversion routines. Units follow the usual
heliocentric convention of the package: AU, days and solar masses.
"""

import numpy as np

PI = np.pi
TWO_PI = 2.0 * np.pi
PI_SQ = np.pi * np.pi

DEG2RAD = np.pi / 180.0

# Gaussian gravitational constant k (IAU 1976), [k^2] = AU^3 M_sun^-1 day^-2
GAUSS_K = 0.01720209895
GAUSS_K2 = 2.9591220828559115e-04
