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
Runner to apply dive profile to a decompression algorithm.
"""

from collections import namedtuple
import logging

from .error import ConfigError
from .profile import to_pressure

logger = logging.getLogger(__name__)

RunResult = namedtuple('RunResult', 'interval snapshots')
RunResult.__doc__ = """
Result of decompression algorithm run.

:var interval: Interval period [min].
:var snapshots: Tuple of snapshot sets, one set per run step and one
    snapshot per tissue compartment in each set.
"""


class Runner(object):
    """
    Runner to apply dive profile to a decompression algorithm at fixed
    interval periods.

    The runner splits each dive profile level into steps lasting interval
    period, for example::

        >>> from divesync.algorithm import get_algorithm
        >>> from divesync.gas import new_nitrox
        >>> from divesync.profile import DiveProfile
        >>> profile = DiveProfile()
        >>> level = profile.add_level(20, 20, new_nitrox(0.21))
        >>> runner = Runner(get_algorithm('zhl16'))
        >>> result = runner.run(3, profile)
        >>> len(result.snapshots)
        7
        >>> [s[0].elapsed_time for s in result.snapshots]
        [3, 6, 9, 12, 15, 18, 20]

    :var algorithm: Decompression algorithm.
    :var result: Result of last run, null if never run.
    """
    def __init__(self, algorithm):
        """
        Create runner.

        :param algorithm: Decompression algorithm.
        """
        self.algorithm = algorithm
        self.result = None


    def steps(self, time, interval):
        """
        Return count of full steps and time rest.

        The time rest is duration of final, partial step. If it is zero,
        then there is no partial step, i.e::

            >>> runner = Runner(None)
            >>> runner.steps(20, 3)
            (6, 2)
            >>> runner.steps(21, 3)
            (7, 0)

        :param time: Exposure time [min].
        :param interval: Interval period [min].
        """
        return divmod(time, interval)


    def run(self, interval, profile):
        """
        Run decompression algorithm for each level of a dive profile.

        After each step a snapshot of all tissue compartments is taken.
        Result of previous run is replaced.

        :param interval: Interval period [min].
        :param profile: Dive profile.
        """
        if interval != int(interval) or interval < 1:
            raise ConfigError(
                'Interval period has to be positive number of minutes, got {}'
                .format(interval)
            )
        interval = int(interval)

        algo = self.algorithm
        snapshots = []
        for level in profile.levels:
            if level.time == 0:
                logger.warning(
                    'no exposure time at {}m, level skipped'
                    .format(level.depth)
                )
                continue

            k, r = self.steps(level.time, interval)
            abs_p = to_pressure(level.depth)
            logger.debug(
                'runner level {}m ({:.4f}atm) for {}min, steps {}, rest {}'
                .format(level.depth, abs_p, level.time, k, r)
            )

            times = [interval] * k
            if r > 0:
                times.append(r)

            for t in times:
                algo.run(level.gas_mix, abs_p, t)
                snapshots.append(algo.snapshot())

        self.result = RunResult(interval, tuple(snapshots))
        logger.info(
            '{} run finished, {} snapshot sets'
            .format(algo.name, len(snapshots))
        )
        return self.result


# vim: sw=4:et:ai
