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
DiveSync data flow coroutines.
"""

from functools import wraps


def coroutine(func):
    """
    Decorator for a coroutine function.

    Advances a coroutine to its first ``(yield)`` statement.
    """
    @wraps(func)
    def start(*args, **kwargs):
        cr = func(*args, **kwargs)
        next(cr)
        return cr
    return start


def feed(target, snapshots):
    """
    Send snapshot sets of algorithm run to a coroutine.

    :param target: Coroutine receiving snapshot sets.
    :param snapshots: Collection of snapshot sets.
    """
    for item in snapshots:
        target.send(item)
    return target


# vim: sw=4:et:ai
