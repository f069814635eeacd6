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
Tests for DiveSync output functions and coroutines.
"""

import csv
import io
import os.path
import tempfile

from divesync.algorithm import ZHL16Algorithm
from divesync.flow import coroutine, feed
from divesync.output import csv_writer, data_dir, save_result
from divesync.runner import Runner

from .tools import _profile, AIR

import unittest
from unittest import mock


def _result():
    runner = Runner(ZHL16Algorithm())
    return runner.run(5, _profile((30, 10, AIR)))


class CSVWriterTestCase(unittest.TestCase):
    """
    CSV writer tests.
    """
    def test_csv_writer(self):
        """
        Test CSV writer header and rows
        """
        result = _result()
        f = io.StringIO()
        feed(csv_writer(f), result.snapshots)

        f.seek(0)
        rows = list(csv.reader(f))
        self.assertEqual(1 + 2 * 16, len(rows))

        header = rows[0]
        self.assertEqual('cpt_num', header[0])
        self.assertEqual('last_depth', header[-1])
        self.assertEqual(13, len(header))

        row = rows[1]
        self.assertEqual('0', row[0])
        self.assertEqual('Nitrox', row[9])
        self.assertEqual('ZHL16-A', row[10])
        self.assertEqual('5', row[11])
        self.assertEqual('30.0', row[12])

        row = rows[-1]
        self.assertEqual('15', row[0])
        self.assertEqual('10', row[11])


    def test_csv_writer_target(self):
        """
        Test CSV writer forwarding snapshot sets
        """
        data = []
        @coroutine
        def sink():
            while True:
                v = (yield)
                data.append(v)

        result = _result()
        feed(csv_writer(io.StringIO(), sink()), result.snapshots)
        self.assertEqual(list(result.snapshots), data)



class SaveResultTestCase(unittest.TestCase):
    """
    Saving decompression algorithm run result tests.
    """
    def test_data_dir(self):
        """
        Test default data directory
        """
        with mock.patch('os.path.expanduser') as f:
            f.return_value = '/home/diver'
            self.assertEqual('/home/diver/.divesync/data', data_dir())
            f.assert_called_once_with('~')


    def test_save_result(self):
        """
        Test saving result in timestamped directory
        """
        result = _result()
        with tempfile.TemporaryDirectory() as path:
            fn = save_result(result, path)

            self.assertTrue(os.path.exists(fn))
            self.assertEqual('result.csv', os.path.basename(fn))
            ts = os.path.basename(os.path.dirname(fn))
            self.assertTrue(ts.isdigit())
            self.assertEqual(path, os.path.dirname(os.path.dirname(fn)))

            with open(fn) as f:
                rows = list(csv.reader(f))
            self.assertEqual(33, len(rows))


    def test_save_result_default(self):
        """
        Test saving result in default data directory
        """
        result = _result()
        with tempfile.TemporaryDirectory() as path:
            with mock.patch('divesync.output.data_dir') as f:
                f.return_value = path
                fn = save_result(result)
            self.assertTrue(fn.startswith(path))
            self.assertTrue(os.path.exists(fn))


# vim: sw=4:et:ai
