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
DiveSync command line interface.
"""

import argparse
import logging
import sys

from .algorithm import get_algorithm
from .error import ConfigError
from .gas import new_nitrox, new_trimix
from .profile import DiveProfile
from .runner import Runner
from .output import save_result
from . import const

logger = logging.getLogger(__name__)


def parse_gas(text):
    """
    Parse gas mix description.

    The description is oxygen percentage, i.e. `32` for EAN32, or oxygen
    and helium percentages separated with comma, i.e. `18,45` for trimix
    18/45.

    :param text: Gas mix description.
    """
    items = text.split(',')
    try:
        values = [float(v) / 100 for v in items]
    except ValueError:
        raise ConfigError('Invalid gas mix "{}"'.format(text))

    if len(values) == 1:
        return new_nitrox(values[0])
    elif len(values) == 2:
        o2, he = values
        return new_trimix(he, o2)
    else:
        raise ConfigError('Invalid gas mix "{}"'.format(text))


def _single_level(args, time):
    gas = parse_gas(args.gas)
    profile = DiveProfile()
    profile.add_level(args.depth, time, gas)
    return profile


def cmd_ndl(args):
    algo = get_algorithm(args.algorithm)
    ndl = algo.compute_ndl(_single_level(args, 0))
    print(
        'No decompression limit for depth {}m is {}min, with algorithm {}'
        .format(args.depth, ndl, algo.name)
    )


def cmd_deco(args):
    algo = get_algorithm(args.algorithm)
    stops = algo.compute_deco_stops(_single_level(args, args.time))
    for stop in stops:
        print(stop)


def cmd_run(args):
    algo = get_algorithm(args.algorithm)
    runner = Runner(algo)
    result = runner.run(args.interval, _single_level(args, args.time))

    last = result.snapshots[-1] if result.snapshots else ()
    for cpt in last:
        print(
            '{:2d} {:8.2f}min N2={:.4f}atm He={:.4f}atm ceiling={:.4f}atm'
            .format(
                cpt.cpt_num + 1, cpt.half_time, cpt.pp_n2, cpt.pp_he,
                cpt.ceiling
            )
        )

    if args.csv:
        fn = save_result(result)
        print('Result saved in {}'.format(fn))

    if args.plot:
        from .plot import plot_result
        plot_result(result, args.plot, args.plot_gas)
        print('Plot saved in {}'.format(args.plot))


def _depth_arg(parser):
    parser.add_argument(
        '-d', '--depth', type=float, required=True, help='dive depth [m]'
    )


def _algo_arg(parser):
    parser.add_argument(
        '-a', '--algorithm', default=const.DEFAULT_ALGORITHM,
        help='decompression algorithm (dsat, zhl16, zhl16-a, zhl16-b,'
            ' zhl16-c; default %(default)s)'
    )


def _gas_arg(parser):
    parser.add_argument(
        '-g', '--gas', default='21',
        help='gas mix, O2 percentage or O2 and He percentages, i.e. 32'
            ' or 18,45 (default %(default)s)'
    )


def _time_arg(parser):
    parser.add_argument(
        '-t', '--time', type=int, required=True, help='dive time [min]'
    )


def create_parser():
    """
    Create command line arguments parser.
    """
    parser = argparse.ArgumentParser(
        prog='divesync',
        description='DiveSync - command line utility to calculate all'
            ' things deco'
    )
    parser.add_argument(
        '--debug', action='store_true', default=False,
        help='show debug information'
    )
    sub = parser.add_subparsers(dest='command')
    sub.required = True

    p = sub.add_parser('ndl', help='compute no-decompression limit')
    _depth_arg(p)
    _algo_arg(p)
    _gas_arg(p)
    p.set_defaults(func=cmd_ndl)

    p = sub.add_parser('deco', help='compute decompression stops')
    _depth_arg(p)
    _time_arg(p)
    _algo_arg(p)
    _gas_arg(p)
    p.set_defaults(func=cmd_deco)

    p = sub.add_parser('run', help='run dive profile')
    _depth_arg(p)
    _time_arg(p)
    _algo_arg(p)
    _gas_arg(p)
    p.add_argument(
        '-i', '--interval', type=int, default=const.DEFAULT_INTERVAL,
        help='interval period [min] (default %(default)s)'
    )
    p.add_argument(
        '--csv', action='store_true', default=False,
        help='save result in CSV file in data directory'
    )
    p.add_argument('--plot', metavar='FILE', help='save plot in file')
    p.add_argument(
        '--plot-gas', choices=('n2', 'he'), default='n2',
        help='inert gas to plot (default %(default)s)'
    )
    p.set_defaults(func=cmd_run)

    return parser


def main(argv=None):
    """
    Run DiveSync command line interface and return exit status.

    :param argv: Command line arguments, `sys.argv` if null.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(level=level)
    logger.debug('command: {}'.format(args.command))

    try:
        args.func(args)
    except ConfigError as ex:
        print('divesync: error: {}'.format(ex), file=sys.stderr)
        return 1
    except NotImplementedError as ex:
        print('divesync: not implemented: {}'.format(ex), file=sys.stderr)
        return 1
    return 0


# vim: sw=4:et:ai
