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
Introduction
------------
The Buhlmann decompression model describes human body as 16 tissue
compartments. Each compartment absorbs and releases inert gases, nitrogen
and helium, independently of other compartments. The speed of the gas
exchange is determined by half-time of a compartment - time in which the
compartment closes half of the gap between its inert gas pressure and
pressure of inspired inert gas.

The initial version of the model (ZH-L16A) was revised, which resulted in
more conservative ZH-L16B and ZH-L16C versions. DiveSync supports all
three variants as coefficient sets of :class:`ZHL16Compartment` class.

Parameters
----------
For an inert gas and for each compartment the model assigns the following
parameters

half-time
    Half-time constant for inert gas.
A
    Buhlmann coefficient A, :math:`A = 2 / T_{ht}^{1/3}`.
B
    Buhlmann coefficient B, :math:`B = 1.005 - 1 / T_{ht}^{1/2}`.

Some of the nitrogen coefficients of ZH-L16B and ZH-L16C variants are not
calculated with the equations above, but taken from published tables,
see :data:`N2_A_OVERRIDE` and :data:`N2_B_OVERRIDE`.

Helium half-times are derived from nitrogen half-times with Graham's law.
The speed of diffusion of two gases is inversely proportional to the
square root of their molar mass, therefore helium diffuses about 2.65
times faster than nitrogen::

    >>> round(N2_HALF_TIME[0] / HE_HALF_TIME[0], 4)
    2.6458

Equations
---------
Inert gas pressure in a compartment after time of exposure :math:`t` is

    .. math::

        P = P_{i} + (P_{insp} - P_{i}) * (1 - 2^{-t / T_{ht}})

where

:math:`P_{i}`
    Initial inert gas pressure in a tissue compartment.
:math:`P_{insp}`
    Pressure of inspired inert gas, :math:`P_{insp} = F_{gas} * P_{abs}`.
:math:`T_{ht}`
    Inert gas half-time of the compartment.

The equation is applied to nitrogen and helium separately. Applied
recursively at constant depth, it gives the same result for one step of
time :math:`t` as for many steps summing up to :math:`t`.

Maximum tolerated inert gas pressure (M-value) at absolute pressure
:math:`P_{abs}` is

    .. math::

        M = P_{abs} / B + A

and absolute pressure of ascent ceiling of a compartment with inert gas
pressure :math:`P` is

    .. math::

        P_{l} = (P - A) * B

Example
~~~~~~~
First compartment of ZH-L16A breathing air after 10 minutes at 30m::

    >>> from divesync.gas import new_nitrox
    >>> air = new_nitrox(0.21)
    >>> cpt = ZHL16Compartment(0, air)
    >>> cpt.update_pressure(4.0, 10)
    >>> round(cpt.pp_n2, 6)
    2.706343
    >>> round(cpt.ceiling(), 6)
    0.730443

Trimix
------
When breathing trimix, half-time and coefficients of a compartment are
blended from nitrogen and helium values. Two blending equations exist in
DiveSync, see :func:`blend_weighted` and :func:`blend_literal`.
"""

from .gas import GasType
from .profile import to_depth
from . import const

N2_HALF_TIME = (
    4.0, 8.0, 12.5, 18.5, 27.0, 38.3, 54.3, 77.0,
    109.0, 146.0, 187.0, 239.0, 305.0, 390.0, 498.0, 635.0,
)

# nitrogen A coefficient overrides for each variant, compartment -> value
N2_A_OVERRIDE = {
    'A': {},
    'B': {5: 0.5600, 6: 0.4947, 7: 0.4500, 12: 0.2850},
    'C': {
        4: 0.6200, 5: 0.5043, 6: 0.4410, 7: 0.4000, 8: 0.3750, 9: 0.3500,
        10: 0.3295, 11: 0.3065, 12: 0.2835, 13: 0.2610, 14: 0.2480,
    },
}

# nitrogen B coefficient overrides, regardless of variant
N2_B_OVERRIDE = {3: 0.7825, 4: 0.8126}

VARIANTS = tuple(sorted(N2_A_OVERRIDE))


def he_half_times(n2_half_time):
    """
    Derive helium half-times from nitrogen half-times using Graham's law.

    :param n2_half_time: Collection of nitrogen half-time values.
    """
    ratio = (const.N2_MOLAR_MASS / const.HE_MOLAR_MASS) ** 0.5
    return tuple(v / ratio for v in n2_half_time)


HE_HALF_TIME = he_half_times(N2_HALF_TIME)


def eq_exposure(p_i, p_insp, time, half_time):
    """
    Calculate inert gas pressure in a tissue compartment after exposure
    at constant depth.

    :param p_i: Initial inert gas pressure in tissue compartment.
    :param p_insp: Pressure of inspired inert gas.
    :param time: Time of exposure [min].
    :param half_time: Inert gas half-time of tissue compartment.
    """
    assert time >= 0
    return p_i + (p_insp - p_i) * (1 - 2 ** (-time / half_time))


def eq_a(half_time):
    return 2 / half_time ** (1 / 3)


def eq_b(half_time):
    return 1.005 - 1 / half_time ** 0.5


def eq_m_value(abs_p, a, b):
    """
    Calculate maximum tolerated inert gas pressure (M-value) at absolute
    pressure of depth.

    :param abs_p: Absolute pressure [atm].
    :param a: Buhlmann coefficient A.
    :param b: Buhlmann coefficient B.
    """
    return abs_p / b + a


def eq_ceiling(p, a, b):
    """
    Calculate absolute pressure of ascent ceiling of a tissue compartment.

    :param p: Inert gas pressure in tissue compartment.
    :param a: Buhlmann coefficient A.
    :param b: Buhlmann coefficient B.
    """
    return (p - a) * b


def blend_weighted(n2_value, he_value, f_n2, f_he):
    """
    Blend nitrogen and helium values with average weighted by inert gas
    fractions.

    :param n2_value: Nitrogen value, i.e. half-time.
    :param he_value: Helium value.
    :param f_n2: Fraction of nitrogen in gas mix.
    :param f_he: Fraction of helium in gas mix.
    """
    return (he_value * f_he + n2_value * f_n2) / (f_he + f_n2)


def blend_literal(n2_value, he_value, f_n2, f_he):
    """
    Blend nitrogen and helium values dividing by helium fraction only,
    then adding nitrogen fraction.

    The values can be far from both nitrogen and helium values. The
    function reproduces equation of the first versions of DiveSync and is
    kept for comparison with old results.

    .. seealso:: :func:`blend_weighted`
    """
    return (he_value * f_he + n2_value * f_n2) / f_he + f_n2


class ZHL16Compartment(object):
    """
    ZH-L16 tissue compartment.

    :var no: Compartment number (starting with zero).
    :var gas_mix: Gas mix currently breathed.
    :var variant: Coefficients variant, one of `A`, `B`, `C`.
    :var blend: Function to blend nitrogen and helium values for trimix.
    :var pp_n2: Nitrogen pressure in the compartment [atm].
    :var pp_he: Helium pressure in the compartment [atm].
    :var elapsed_time: Total time of exposure [min].
    :var abs_p: Absolute pressure of last exposure [atm].
    """
    def __init__(self, no, gas_mix, variant=const.DEFAULT_VARIANT,
            blend=blend_weighted):
        """
        Create tissue compartment loaded with inert gases of a gas mix at
        the surface.

        :param no: Compartment number (starting with zero).
        :param gas_mix: Gas mix.
        :param variant: Coefficients variant.
        :param blend: Trimix blending function.
        """
        assert 0 <= no < const.NUM_COMPARTMENTS
        assert variant in VARIANTS, variant
        self.no = no
        self.gas_mix = gas_mix
        self.variant = variant
        self.blend = blend
        self.pp_n2 = gas_mix.pp_n2(const.SURFACE_PRESSURE)
        self.pp_he = gas_mix.pp_he(const.SURFACE_PRESSURE)
        self.elapsed_time = 0
        self.abs_p = const.SURFACE_PRESSURE


    @property
    def depth(self):
        """
        Depth of last exposure [m].
        """
        return to_depth(self.abs_p)


    def update_pressure(self, abs_p, time, gas_mix=None):
        """
        Load the compartment with inert gases for time of exposure at
        absolute pressure.

        :param abs_p: Absolute pressure [atm].
        :param time: Time of exposure [min].
        :param gas_mix: Gas mix to breathe, current gas mix if null.
        """
        if gas_mix is not None:
            self.gas_mix = gas_mix

        mix = self.gas_mix
        self.pp_n2 = eq_exposure(
            self.pp_n2, mix.pp_n2(abs_p), time, self.n2_half_time
        )
        self.pp_he = eq_exposure(
            self.pp_he, mix.pp_he(abs_p), time, self.he_half_time
        )
        self.elapsed_time += time
        self.abs_p = abs_p


    @property
    def n2_half_time(self):
        return N2_HALF_TIME[self.no]


    @property
    def he_half_time(self):
        return HE_HALF_TIME[self.no]


    def pressure(self):
        """
        Total inert gas pressure in the compartment.
        """
        return self.pp_n2 + self.pp_he


    def half_time(self):
        """
        Half-time of the compartment for current gas mix.
        """
        return self._by_gas(self.n2_half_time, self.he_half_time)


    def a(self):
        """
        Buhlmann coefficient A for current gas mix.
        """
        return self._by_gas(self.n2_a(), self.he_a())


    def b(self):
        """
        Buhlmann coefficient B for current gas mix.
        """
        return self._by_gas(self.n2_b(), self.he_b())


    def n2_a(self):
        overrides = N2_A_OVERRIDE[self.variant]
        if self.no in overrides:
            return overrides[self.no]
        return eq_a(self.n2_half_time)


    def n2_b(self):
        if self.no in N2_B_OVERRIDE:
            return N2_B_OVERRIDE[self.no]
        return eq_b(self.n2_half_time)


    def he_a(self):
        return eq_a(self.he_half_time)


    def he_b(self):
        return eq_b(self.he_half_time)


    def m_value(self, abs_p=None):
        """
        Calculate maximum tolerated inert gas pressure in the compartment.

        :param abs_p: Absolute pressure [atm], pressure of last exposure
            if null.
        """
        if abs_p is None:
            abs_p = self.abs_p
        return eq_m_value(abs_p, self.a(), self.b())


    def ceiling(self):
        """
        Calculate absolute pressure of ascent ceiling of the compartment.
        """
        return eq_ceiling(self.pressure(), self.a(), self.b())


    def _by_gas(self, n2_value, he_value):
        """
        Choose nitrogen or helium value depending on current gas mix, blend
        both for trimix.
        """
        mix_type = self.gas_mix.mix_type()
        if mix_type == GasType.HELIOX:
            return he_value
        elif mix_type == GasType.TRIMIX:
            return self.blend(
                n2_value, he_value,
                self.gas_mix.n2.fraction, self.gas_mix.he.fraction
            )
        else:
            return n2_value


    def __repr__(self):
        return 'ZHL16Compartment(no={}, pp_n2={:.4f}, pp_he={:.4f},' \
            ' time={:.4f})'.format(
                self.no, self.pp_n2, self.pp_he, self.elapsed_time
            )


# vim: sw=4:et:ai
