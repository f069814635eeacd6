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
DiveSync runner integration tests.
"""

import csv
import io

from divesync import create, new_nitrox, new_trimix, DiveProfile
from divesync.flow import feed
from divesync.output import csv_writer

import unittest


class RunnerTest(unittest.TestCase):
    """
    Abstract class for DiveSync runner test cases.
    """
    def _profile(self):
        tx = new_trimix(0.35, 0.21)
        ean50 = new_nitrox(0.5)
        profile = DiveProfile()
        profile.add_level(45, 20, tx)
        profile.add_level(21, 4, ean50)
        profile.add_level(6, 10, ean50)
        return profile



class RunnerTestCase(RunnerTest):
    """
    DiveSync runner integration tests.
    """
    def test_interval_stability(self):
        """
        Test final tissue compartments state does not depend on interval
        """
        results = [
            create('zhl16-b').run(k, self._profile()) for k in (1, 3, 34)
        ]
        last = [r.snapshots[-1] for r in results]
        for s in last[1:]:
            for c1, c2 in zip(last[0], s):
                self.assertAlmostEqual(c1.pp_n2, c2.pp_n2, 6)
                self.assertAlmostEqual(c1.pp_he, c2.pp_he, 6)
                self.assertEqual(34, c2.elapsed_time)

        self.assertEqual([34, 13, 3], [len(r.snapshots) for r in results])


    def test_trimix_dive(self):
        """
        Test multi-level trimix dive with gas switches
        """
        result = create('zhl16-c').run(5, self._profile())
        self.assertEqual(4 + 1 + 2, len(result.snapshots))

        types = [s[0].gas_type for s in result.snapshots]
        self.assertEqual(['Trimix'] * 4 + ['Nitrox'] * 3, types)

        # helium is eliminated after switch to nitrox
        he = [s[0].pp_he for s in result.snapshots]
        self.assertTrue(he[3] > he[4] > he[5] > he[6])

        # no tissue compartment exceeds its M-value
        for snapshots in result.snapshots:
            for cpt in snapshots:
                self.assertTrue(cpt.pp_n2 + cpt.pp_he < cpt.m_value)


    def test_csv(self):
        """
        Test saving multi-level dive result in CSV format
        """
        result = create().run(5, self._profile())
        f = io.StringIO()
        feed(csv_writer(f), result.snapshots)

        f.seek(0)
        rows = list(csv.DictReader(f))
        self.assertEqual(7 * 16, len(rows))
        self.assertEqual('45.0', rows[0]['last_depth'])
        self.assertEqual('6.0', rows[-1]['last_depth'])
        self.assertEqual('34', rows[-1]['elapsed_time'])
        self.assertEqual('ZHL16-A', rows[-1]['variant'])


# vim: sw=4:et:ai
