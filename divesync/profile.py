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
Multi-level dive profile.
"""

from collections import namedtuple

from .error import ConfigError
from . import const

Level = namedtuple('Level', 'depth time gas_mix')
Level.__doc__ = """
Dive profile level.

:var depth: Depth [m].
:var time: Exposure time at depth [min].
:var gas_mix: Gas mix breathed at depth.
"""


def to_pressure(depth):
    """
    Convert depth in meters to absolute pressure [atm].

    :param depth: Depth in meters.
    """
    return (depth + const.ATM_DEPTH) / const.ATM_DEPTH


def to_depth(abs_p):
    """
    Convert absolute pressure [atm] to depth in meters.

    :param abs_p: Absolute pressure of depth [atm].
    """
    return abs_p * const.ATM_DEPTH - const.ATM_DEPTH


class DiveProfile(object):
    """
    Dive profile - ordered collection of dive levels.

    :var levels: List of dive levels.
    """
    def __init__(self):
        self.levels = []


    def add_level(self, depth, time, gas_mix):
        """
        Append dive level to the profile.

        :param depth: Depth [m].
        :param time: Exposure time at depth [min].
        :param gas_mix: Gas mix breathed at depth.
        """
        if depth < 0:
            raise ConfigError('Negative depth {}m'.format(depth))
        if time < 0 or time != int(time):
            raise ConfigError(
                'Exposure time has to be whole number of minutes, got {}'
                .format(time)
            )
        level = Level(depth, int(time), gas_mix)
        self.levels.append(level)
        return level


    def __len__(self):
        return len(self.levels)


    def __iter__(self):
        return iter(self.levels)


# vim: sw=4:et:ai
