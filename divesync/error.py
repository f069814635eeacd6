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
DiveSync exceptions.

Configuration errors are caused by invalid user input, i.e. unknown
decompression algorithm name or gas mix with negative nitrogen fraction,
and can be reported back to a user.

Engine errors indicate misuse of the calculation engine and should abort
current calculations.
"""

class DiveSyncError(Exception):
    """
    Base class for DiveSync errors.
    """


class ConfigError(DiveSyncError):
    """
    DiveSync configuration error.
    """


class UnknownAlgorithmError(ConfigError):
    """
    Decompression algorithm name is not recognized.
    """


class GasMixError(ConfigError):
    """
    Breathing gas recipe is not physically possible.
    """


class EngineError(DiveSyncError):
    """
    DiveSync calculation engine error.
    """


class AlgorithmStateError(EngineError):
    """
    Tissue compartments of a decompression algorithm initialized more
    than once.
    """


# vim: sw=4:et:ai
