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
Search functions used by decompression algorithms.
"""

import logging

logger = logging.getLogger(__name__)


def bisect_find(n, f, *args, **kw):
    """
    Find largest `k` for which `f(k)` is true.

    The `k` is integer in range `1 <= k <= n`. The function `f` has to be
    monotonic, i.e. if `f(k)` is false, then `f(k + 1)` is false as well.
    If there is no `k` for which `f(k)` is true, then `0` is returned.

    For example, find largest number of minutes below 18::

        >>> bisect_find(60, lambda k: k < 18)
        17

    :param n: Range for `k`, so :math:`1 <= k <= n`.
    :param f: Invariant function accepting `k`.
    :param *args: Additional positional parameters of `f`.
    :param **kw: Additional named parameters of `f`.
    """
    lo = 1
    hi = n + 1

    while lo < hi:
        k = (lo + hi) // 2
        if __debug__:
            logger.debug('bisect range: {} <= {} <= {}'.format(lo, k, hi))

        if f(k, *args, **kw):
            lo = k + 1
        else:
            hi = k

    # hi is first k for which f(k) is false
    return hi - 1


# vim: sw=4:et:ai
