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
Breathing gas mix model.

A gas mix is created from a breathing gas recipe - fraction of oxygen and
fraction of helium. Fraction of nitrogen is derived from background
fraction of nitrogen in air (0.78), which is displaced by oxygen above
0.21 and by helium, i.e. for EAN32::

    >>> mix = new_nitrox(0.32)
    >>> round(mix.n2.fraction, 2)
    0.67
    >>> mix.mix_type()
    'Nitrox'

and for trimix 18/45::

    >>> mix = new_trimix(0.45, 0.18)
    >>> round(mix.n2.fraction, 2)
    0.33
    >>> mix.mix_type()
    'Trimix'

Partial pressure of a gas is its fraction multiplied by absolute pressure
[atm]::

    >>> round(mix.pp_he(4.0), 2)
    1.8
"""

from collections import namedtuple
import logging

from .error import GasMixError
from . import const

logger = logging.getLogger(__name__)


class Species(object):
    """
    Gas species enumeration.
    """
    OXYGEN = 'O2'
    HELIUM = 'He'
    NITROGEN = 'N2'


class GasType(object):
    """
    Gas mix type enumeration.

    NITROX
        No helium in gas mix.
    HELIOX
        Helium and no nitrogen in gas mix.
    TRIMIX
        Both helium and nitrogen in gas mix.
    """
    NITROX = 'Nitrox'
    HELIOX = 'Heliox'
    TRIMIX = 'Trimix'


class Gas(namedtuple('Gas', 'fraction species')):
    """
    Gas in a breathing gas mix.

    :var fraction: Partial pressure fraction of the gas at 1 atm.
    :var species: Gas species.
    """
    __slots__ = ()

    def pp(self, abs_p):
        """
        Calculate partial pressure of the gas.

        :param abs_p: Absolute pressure [atm].
        """
        return abs_p * self.fraction


    @property
    def present(self):
        return self.fraction > 0


    @property
    def percent(self):
        return self.fraction * 100


    def __str__(self):
        return '{}={:.4f}'.format(self.species, self.fraction)



class GasMix(namedtuple('GasMix', 'o2 n2 he')):
    """
    Breathing gas mix.

    Use :func:`new_nitrox` or :func:`new_trimix` functions to create gas
    mix, which keeps fractions of all three gases consistent.

    :var o2: Oxygen.
    :var n2: Nitrogen.
    :var he: Helium.
    """
    __slots__ = ()

    def partial_pressure(self, species, abs_p):
        """
        Calculate partial pressure of a gas in the gas mix.

        :param species: Gas species.
        :param abs_p: Absolute pressure [atm].
        """
        gas = {
            Species.OXYGEN: self.o2,
            Species.NITROGEN: self.n2,
            Species.HELIUM: self.he,
        }[species]
        return gas.pp(abs_p)


    def pp_o2(self, abs_p):
        return self.o2.pp(abs_p)


    def pp_n2(self, abs_p):
        return self.n2.pp(abs_p)


    def pp_he(self, abs_p):
        return self.he.pp(abs_p)


    def mix_type(self):
        """
        Classify the gas mix by presence of inert gases.
        """
        if self.he.present and not self.n2.present:
            return GasType.HELIOX
        elif self.he.present and self.n2.present:
            return GasType.TRIMIX
        else:
            return GasType.NITROX


    def __str__(self):
        return '{} ({}, {}, {})'.format(
            self.mix_type(), self.o2, self.n2, self.he
        )



def _check_fraction(name, value):
    if not 0 <= value <= 1:
        raise GasMixError(
            '{} fraction {} out of range [0, 1]'.format(name, value)
        )


def _mix(o2, n2, he):
    # oxygen and helium leave no room for background nitrogen, there is
    # argon residue at most
    if n2 < const.EPSILON:
        n2 = 0.0
    mix = GasMix(
        Gas(o2, Species.OXYGEN),
        Gas(n2, Species.NITROGEN),
        Gas(he, Species.HELIUM),
    )
    if __debug__:
        logger.debug('gas mix {}'.format(mix))
    return mix


def new_nitrox(o2):
    """
    Create nitrox gas mix.

    :param o2: Fraction of oxygen, i.e. 0.32 for EAN32.
    """
    _check_fraction('Oxygen', o2)
    if o2 <= const.PPO2:
        n2 = const.PPN2
    else:
        n2 = const.PPN2 - (o2 - const.PPO2)
    return _mix(o2, n2, 0.0)


def new_trimix(he, o2):
    """
    Create trimix gas mix.

    If there is no nitrogen left after displacing it with helium and
    oxygen, then the gas mix is heliox.

    :param he: Fraction of helium.
    :param o2: Fraction of oxygen.
    """
    _check_fraction('Helium', he)
    _check_fraction('Oxygen', o2)
    if he + o2 > 1 + const.EPSILON:
        raise GasMixError(
            'Helium and oxygen fractions sum over 1 ({} + {})'.format(he, o2)
        )

    if o2 <= const.PPO2:
        n2 = const.PPN2 - he
    else:
        n2 = const.PPN2 - (he + (o2 - const.PPO2))
    return _mix(o2, n2, he)


# vim: sw=4:et:ai
