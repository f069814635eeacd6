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
DiveSync output functions and coroutines.

The implemented coroutines and functions

- save tissue compartment snapshots in CSV file
- save result of decompression algorithm run in data directory
"""

import csv
import logging
import os
import os.path
import time

from .algorithm import CompartmentSnapshot
from .flow import coroutine, feed
from . import const

logger = logging.getLogger(__name__)


@coroutine
def csv_writer(f, target=None):
    """
    Write snapshot sets into a CSV file.

    Each tissue compartment snapshot is written as one row.

    :param f: File object.
    :param target: Optional coroutine to forward snapshot sets to.
    """
    fcsv = csv.writer(f)
    fcsv.writerow(CompartmentSnapshot._fields)

    while True:
        snapshots = yield
        for cpt in snapshots:
            fcsv.writerow(cpt)

        if target:
            target.send(snapshots)


def data_dir():
    """
    Return default directory to save results, `~/.divesync/data`.
    """
    return os.path.join(os.path.expanduser('~'), const.DATA_DIR, 'data')


def save_result(result, path=None):
    """
    Save result of decompression algorithm run in `result.csv` file.

    The file is created in timestamped subdirectory of data directory.
    The path of the file is returned.

    :param result: Decompression algorithm run result.
    :param path: Data directory, :func:`data_dir` if null.
    """
    if path is None:
        path = data_dir()
    path = os.path.join(path, str(int(time.time() * 1000)))
    os.makedirs(path, exist_ok=True)

    fn = os.path.join(path, 'result.csv')
    with open(fn, 'w', newline='') as f:
        feed(csv_writer(f), result.snapshots)

    logger.info('result saved in {}'.format(fn))
    return fn


# vim: sw=4:et:ai
