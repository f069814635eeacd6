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
Decompression algorithms.

A decompression algorithm owns state of all tissue compartments of
a diver. The state is changed by running the algorithm for period of time
at absolute pressure of depth with a gas mix. The state can be read any
time with a snapshot::

    >>> from divesync.gas import new_nitrox
    >>> algo = get_algorithm('zhl16-b')
    >>> algo.name
    'ZHL16-B'
    >>> algo.run(new_nitrox(0.21), 3.0, 20)
    >>> snapshot = algo.snapshot()
    >>> len(snapshot)
    16
    >>> snapshot[0].elapsed_time
    20

The supported algorithms are

ZHL16-A, ZHL16-B, ZHL16-C
    Buhlmann ZH-L16 decompression model, see :mod:`divesync.tissue`.
DSAT
    DSAT decompression model, not implemented yet.
"""

from collections import namedtuple
from functools import partial
import copy
import logging

from .error import AlgorithmStateError, ConfigError, UnknownAlgorithmError
from .ft import bisect_find
from .profile import to_pressure
from .tissue import ZHL16Compartment, blend_weighted
from . import const

logger = logging.getLogger(__name__)

CompartmentSnapshot = namedtuple(
    'CompartmentSnapshot',
    'cpt_num half_time pp_n2 pp_he m_value ceiling o2_percent n2_percent'
    ' he_percent gas_type variant elapsed_time last_depth'
)
CompartmentSnapshot.__doc__ = """
State of a tissue compartment at an instant of a dive.

:var cpt_num: Compartment number (starting with zero).
:var half_time: Half-time of compartment for breathed gas mix.
:var pp_n2: Nitrogen pressure in compartment [atm].
:var pp_he: Helium pressure in compartment [atm].
:var m_value: Maximum tolerated inert gas pressure at last depth [atm].
:var ceiling: Absolute pressure of ascent ceiling [atm].
:var o2_percent: Oxygen percentage of breathed gas mix.
:var n2_percent: Nitrogen percentage of breathed gas mix.
:var he_percent: Helium percentage of breathed gas mix.
:var gas_type: Type of breathed gas mix.
:var variant: Name of decompression algorithm.
:var elapsed_time: Total time of exposure [min].
:var last_depth: Depth of last exposure [m].
"""


class DecoAlgorithm(object):
    """
    Base class for decompression algorithms.

    :var name: Name of decompression algorithm.
    """
    name = None

    def run(self, gas_mix, abs_p, time):
        """
        Expose tissue compartments to absolute pressure for period of
        time.

        :param gas_mix: Gas mix breathed.
        :param abs_p: Absolute pressure of depth [atm].
        :param time: Time of exposure [min].
        """
        raise NotImplementedError()


    def snapshot(self):
        """
        Return tuple of snapshots of all tissue compartments.
        """
        raise NotImplementedError()


    def compute_ndl(self, profile):
        """
        Calculate no-decompression limit [min] at depth of last level of
        a dive profile.

        :param profile: Dive profile.
        """
        raise NotImplementedError()


    def compute_deco_stops(self, profile):
        """
        Calculate decompression stops for a dive profile.

        :param profile: Dive profile.
        """
        raise NotImplementedError()


    def __str__(self):
        return self.name



class ZHL16Algorithm(DecoAlgorithm):
    """
    Buhlmann ZH-L16 decompression algorithm.

    :var variant: Coefficients variant, one of `A`, `B`, `C`.
    :var blend: Function to blend nitrogen and helium values for trimix.
    :var tissues: List of tissue compartments, empty until the algorithm
        is initialized.
    :var surface_pressure: Surface pressure [atm].
    :var ndl_max: No-decompression limit search window [min].
    """
    def __init__(self, variant=const.DEFAULT_VARIANT, blend=blend_weighted):
        super().__init__()
        self.variant = variant
        self.blend = blend
        self.tissues = []
        self.surface_pressure = const.SURFACE_PRESSURE
        self.ndl_max = const.NDL_MAX


    @property
    def name(self):
        return 'ZHL16-{}'.format(self.variant)


    def init(self, gas_mix):
        """
        Create tissue compartments loaded with inert gases of a gas mix.

        The compartments can be created only once.

        :param gas_mix: Gas mix.
        """
        if self.tissues:
            raise AlgorithmStateError(
                'Cannot re-initialize {} algorithm, it is already'
                ' initialized'.format(self.name)
            )
        self.tissues = self._compartments(gas_mix)
        logger.info('{} initialized with {}'.format(self.name, gas_mix))


    def run(self, gas_mix, abs_p, time):
        if not self.tissues:
            self.init(gas_mix)

        for tissue in self.tissues:
            tissue.update_pressure(abs_p, time, gas_mix)


    def snapshot(self):
        return tuple(self._snapshot(t) for t in self.tissues)


    def ceiling(self):
        """
        Calculate absolute pressure of ascent ceiling, which is the
        deepest ceiling of all tissue compartments.
        """
        return max(t.ceiling() for t in self.tissues)


    def compute_ndl(self, profile):
        """
        Calculate no-decompression limit [min] at depth of last level of
        a dive profile.

        The profile levels are applied to copy of current tissue
        compartments (or new compartments if the algorithm is not
        initialized). Then the largest number of minutes at depth of the
        last level is found, for which ascent ceiling of every compartment
        is not deeper than the surface.

        If ascent ceiling is already deeper than the surface when the last
        level ends, then `0` is returned. Otherwise a compartment
        off-gassing at the last depth stays within the limit, a compartment
        on-gassing exceeds the limit once and for all, so the search is
        monotonic.

        If the limit is not found within search window, then the window
        size is returned, see :attr:`ndl_max`.

        State of the algorithm is not changed.

        :param profile: Dive profile.
        """
        if not profile.levels:
            raise ConfigError('Cannot calculate NDL for empty dive profile')

        levels = profile.levels
        if self.tissues:
            tissues = [copy.copy(t) for t in self.tissues]
        else:
            tissues = self._compartments(levels[0].gas_mix)

        for level in levels:
            abs_p = to_pressure(level.depth)
            for t in tissues:
                t.update_pressure(abs_p, level.time, level.gas_mix)

        abs_p = to_pressure(levels[-1].depth)
        if not self._within_limit(0, tissues, abs_p):
            logger.info(
                'ascent ceiling below the surface at {}m, no NDL'
                .format(levels[-1].depth)
            )
            return 0

        ndl = bisect_find(self.ndl_max, self._within_limit, tissues, abs_p)
        if ndl == self.ndl_max:
            logger.info(
                'no NDL found within {}min at {}m'
                .format(self.ndl_max, levels[-1].depth)
            )
        return ndl


    def compute_deco_stops(self, profile):
        raise NotImplementedError(
            'Decompression stops calculation is not implemented for {}'
            .format(self.name)
        )


    def _compartments(self, gas_mix):
        return [
            ZHL16Compartment(k, gas_mix, self.variant, self.blend)
            for k in range(const.NUM_COMPARTMENTS)
        ]


    def _within_limit(self, time, tissues, abs_p):
        """
        Check if ascent to the surface is possible after time of exposure
        at absolute pressure.

        :param time: Time of exposure [min].
        :param tissues: Tissue compartments.
        :param abs_p: Absolute pressure of depth [atm].
        """
        for t in tissues:
            t = copy.copy(t)
            t.update_pressure(abs_p, time)
            if t.ceiling() > self.surface_pressure:
                return False
        return True


    def _snapshot(self, tissue):
        mix = tissue.gas_mix
        return CompartmentSnapshot(
            tissue.no,
            tissue.half_time(),
            tissue.pp_n2,
            tissue.pp_he,
            tissue.m_value(),
            tissue.ceiling(),
            mix.o2.percent,
            mix.n2.percent,
            mix.he.percent,
            mix.mix_type(),
            self.name,
            tissue.elapsed_time,
            tissue.depth,
        )



class DSATAlgorithm(DecoAlgorithm):
    """
    DSAT decompression algorithm.

    Not implemented - running the algorithm or calculating no-decompression
    limit raises `NotImplementedError`, so there is no confusion with
    a dive not requiring decompression.
    """
    name = 'DSAT'

    def run(self, gas_mix, abs_p, time):
        raise NotImplementedError('DSAT algorithm is not implemented')


    def snapshot(self):
        return ()


    def compute_ndl(self, profile):
        raise NotImplementedError('DSAT NDL calculation is not implemented')


    def compute_deco_stops(self, profile):
        raise NotImplementedError(
            'DSAT decompression stops calculation is not implemented'
        )



ALGORITHMS = {
    'dsat': DSATAlgorithm,
    'zhl16': partial(ZHL16Algorithm, 'A'),
    'zhl16-a': partial(ZHL16Algorithm, 'A'),
    'zhl16-b': partial(ZHL16Algorithm, 'B'),
    'zhl16-c': partial(ZHL16Algorithm, 'C'),
}


def get_algorithm(name):
    """
    Create decompression algorithm by its name.

    The name is case insensitive, i.e. `ZHL16-C`.

    :param name: Name of decompression algorithm.
    """
    key = name.strip().lower()
    if key not in ALGORITHMS:
        raise UnknownAlgorithmError(
            'Unknown decompression algorithm "{}" (supported: {})'
            .format(name, ', '.join(sorted(ALGORITHMS)))
        )
    algo = ALGORITHMS[key]()
    logger.debug('created algorithm {}'.format(algo.name))
    return algo


# vim: sw=4:et:ai
