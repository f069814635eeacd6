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
Basic Usage
-----------

The DiveSync dive decompression library exports its main API via
``divesync`` module.

The tissue compartments state for a dive profile can be calculated in few
simple steps. The :func:`~divesync.create` function creates
:class:`runner <Runner>` object for a decompression algorithm. Having the
runner, we need to describe dive profile, after which we can start
calculations. The following example calculates tissue compartments state
every 5 minutes for a dive to 30 meters for 20 minutes on air::

    >>> import divesync
    >>> runner = divesync.create('zhl16-c')
    >>> profile = divesync.DiveProfile()
    >>> air = divesync.new_nitrox(0.21)
    >>> level = profile.add_level(30, 20, air)
    >>> result = runner.run(5, profile)

The result contains snapshot of all tissue compartments for each
5 minutes of the dive::

    >>> len(result.snapshots)
    4
    >>> cpt = result.snapshots[-1][0]
    >>> cpt.variant, cpt.gas_type, cpt.elapsed_time, cpt.last_depth
    ('ZHL16-C', 'Nitrox', 20, 30.0)

No-decompression limit is calculated by a decompression algorithm. The
calculation starts from the current state of tissue compartments of the
algorithm, so for a new dive use new algorithm object::

    >>> profile = divesync.DiveProfile()
    >>> level = profile.add_level(40, 0, air)
    >>> algo = divesync.get_algorithm('zhl16-c')
    >>> algo.compute_ndl(profile)
    8

Configuring Decompression Algorithm
-----------------------------------
The decompression algorithms are looked up by name, see
:func:`~divesync.algorithm.get_algorithm` function. The ZH-L16 algorithm
parameters can be adjusted directly, i.e. the function used to blend
nitrogen and helium values when breathing trimix::

    >>> from divesync.tissue import blend_literal
    >>> algo = divesync.get_algorithm('zhl16-b')
    >>> algo.blend = blend_literal
"""

from .algorithm import get_algorithm, ZHL16Algorithm, DSATAlgorithm
from .error import ConfigError, EngineError
from .gas import new_nitrox, new_trimix
from .profile import DiveProfile
from .runner import Runner
from . import const

__version__ = '0.1.0'


def create(name=const.DEFAULT_ALGORITHM):
    """
    Create runner for a decompression algorithm.

    :param name: Name of decompression algorithm.
    """
    return Runner(get_algorithm(name))


__all__ = [
    'create', 'get_algorithm', 'new_nitrox', 'new_trimix', 'DiveProfile',
    'Runner', 'ZHL16Algorithm', 'DSATAlgorithm', 'ConfigError',
    'EngineError',
]

# vim: sw=4:et:ai
