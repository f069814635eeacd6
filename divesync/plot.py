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
Plot tissue compartments inert gas pressure of decompression algorithm
run result.
"""

import logging

from matplotlib import pyplot as plt

logger = logging.getLogger(__name__)

COLORS = 'bgrcmkbgrcmkbgrc'


def series(result, gas='n2'):
    """
    Extract time series of inert gas pressure for each tissue compartment.

    A list of pairs (elapsed time, pressures) is returned, one pair per
    tissue compartment.

    :param result: Decompression algorithm run result.
    :param gas: Inert gas, `n2` or `he`.
    """
    attr = 'pp_' + gas
    data = {}
    for snapshots in result.snapshots:
        for cpt in snapshots:
            runtime, pressure = data.setdefault(cpt.cpt_num, ([], []))
            runtime.append(cpt.elapsed_time)
            pressure.append(getattr(cpt, attr))
    return [data[k] for k in sorted(data)]


def plot_result(result, fn, gas='n2'):
    """
    Plot inert gas pressure of all tissue compartments and save the plot
    in an image file.

    :param result: Decompression algorithm run result.
    :param fn: Image file name.
    :param gas: Inert gas, `n2` or `he`.
    """
    if gas not in ('n2', 'he'):
        raise ValueError('Unknown inert gas {}'.format(gas))

    fig, ax = plt.subplots(figsize=(8, 6))
    for c, (runtime, pressure) in enumerate(series(result, gas)):
        ax.plot(
            runtime, pressure, COLORS[c] + '-', markersize=2,
            label='{}'.format(c + 1)
        )

    ax.set_xlabel('Time [min]')
    ax.set_ylabel('{} pressure [atm]'.format(gas.upper()))
    ax.legend(title='Compartment', fontsize='small', ncol=2)
    fig.savefig(fn)
    plt.close(fig)

    logger.info('plot saved in {}'.format(fn))


# vim: sw=4:et:ai
