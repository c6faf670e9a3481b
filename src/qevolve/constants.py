import math

## CODATA values, SI units

PLANCK_CONSTANT = 6.62607015e-34                            # J s
REDUCED_PLANCK_CONSTANT = PLANCK_CONSTANT / (2 * math.pi)   # J s
ELECTRON_MASS = 9.1093837015e-31                            # kg
ELEMENTARY_CHARGE = 1.602176634e-19                         # C
SPEED_OF_LIGHT = 299792458.0                                # m / s
BOLTZMANN_CONSTANT = 1.380649e-23                           # J / K
VACUUM_PERMITTIVITY = 8.8541878128e-12                      # F / m
VACUUM_PERMEABILITY = 1.25663706212e-6                      # N / A^2

JOULES_PER_ELECTRON_VOLT = 1.602176634e-19


## evolution defaults

DEFAULT_STEPS = 100
