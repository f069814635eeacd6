#
# DiveSync - dive decompression library.
#
# Copyright (C) 2026 by DiveSync developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

"""
DiveSync constants.
"""

# background fractions of breathing gas at the surface
PPN2 = 0.78
PPO2 = 0.21

NUM_COMPARTMENTS = 16

# molar mass [g/mol], used to derive helium half-times (Graham's law)
N2_MOLAR_MASS = 28.0184
HE_MOLAR_MASS = 4.0026

# pressure [atm]
SURFACE_PRESSURE = 1.0

# depth of water column exerting pressure of 1 atm [m]
ATM_DEPTH = 10

EPSILON = 10 ** -10

DEFAULT_VARIANT = 'A'
DEFAULT_ALGORITHM = 'zhl16-a'
DEFAULT_INTERVAL = 5

# NDL search window [min]
NDL_MAX = 999

DATA_DIR = '.divesync'

# vim: sw=4:et:ai
