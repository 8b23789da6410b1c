#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Nov 16 11:31:20 2024

Julian day number math for the Gregorian and the Iranian (Jalali, Solar
Hijri) calendars.

All conversions go through the integer Julian day number (JDN). The JDN of a
date corresponds to the noon of that date (12h Universal Time).

The formulas are total integer functions: a day or month outside its range
is not rejected but rolls over into the adjacent month or year. All integer
divisions truncate toward zero, which is what the formulas are written for;
Python's // floors, so the kernels use _tdiv and _tmod instead.

Gregorian dates are proleptic. The year before +1 is the year 0.

The Iranian leap year algorithm follows K.M. Borkowski, "The Persian
calendar for 3000 years", Earth, Moon and Planets 74 (1996), and is valid
for Iranian years -61 until 3177. Outside this range the results are
deterministic but not meaningful.
"""

import numpy as np
from operator import index as _index
from collections import namedtuple
from irancal.cnumba import cnjit
from irancal.constants import BREAKS, NBREAKS, GREGORIAN_OFFSET, imdays

GregorianDate = namedtuple("GregorianDate", ["year", "month", "day"])
IranianDate = namedtuple("IranianDate", ["year", "month", "day"])
IranianLeapInfo = namedtuple("IranianLeapInfo", ["is_leap", "march_day",
                                                 "gregorian_year",
                                                 "cycle_position"])


@cnjit(signature_or_function='i8(i8, i8)', cache=True)
def _tdiv(a, b):
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -q
    return q


@cnjit(signature_or_function='i8(i8, i8)', cache=True)
def _tmod(a, b):
    return a - b * _tdiv(a, b)


@cnjit(signature_or_function='i8(i8, i8, i8)', cache=True)
def _gregorian_to_jdn(year, month, day):
    c = _tdiv(month - 8, 6)
    jdn = _tdiv((year + c + 100100) * 1461, 4) \
        + _tdiv(153 * _tmod(month + 9, 12) + 2, 5) + day - 34840408
    jdn = jdn - _tdiv(_tdiv(year + 100100 + c, 100) * 3, 4) + 752
    return jdn


@cnjit(signature_or_function='UniTuple(i8, 3)(i8)', cache=True)
def _jdn_to_gregorian(jdn):
    j = 4 * jdn + 139361631
    j += _tdiv(_tdiv(4 * jdn + 183187720, 146097) * 3, 4) * 4 - 3908
    i = _tdiv(_tmod(j, 1461), 4) * 5 + 308
    day = _tdiv(_tmod(i, 153), 5) + 1
    month = _tmod(_tdiv(i, 153), 12) + 1
    year = _tdiv(j, 1461) - 100100 + _tdiv(8 - month, 6)
    return (year, month, day)


@cnjit(signature_or_function='Tuple((boolean, i8, i8, i8))(i8)', cache=True)
def _iranian_leap(year):
    gy = year + GREGORIAN_OFFSET
    leap_j = -14
    jp = BREAKS[0]
    jump = 0
    j = 1
    while True:
        jm = BREAKS[j]
        jump = jm - jp
        if year >= jm:
            leap_j += _tdiv(jump, 33) * 8 + _tdiv(_tmod(jump, 33), 4)
            jp = jm
        j += 1
        if j >= NBREAKS or year < jm:
            break
    n = year - jp
    leap_j += _tdiv(n, 33) * 8 + _tdiv(_tmod(n, 33) + 3, 4)
    if _tmod(jump, 33) == 4 and jump - n == 4:
        leap_j += 1
    leap_g = _tdiv(gy, 4) - _tdiv((_tdiv(gy, 100) + 1) * 3, 4) - 150
    march = 20 + leap_j - leap_g
    if jump - n < 6:
        n = n - jump + _tdiv(jump + 4, 33) * 33
    cycle = _tmod(_tmod(n + 1, 33) - 1, 4)
    if cycle == -1:
        cycle = 4
    return (cycle == 0, gy, march, cycle)


@cnjit(signature_or_function='i8(i8, i8, i8)', cache=True)
def _iranian_to_jdn(year, month, day):
    leap, gy, march, cycle = _iranian_leap(year)
    return _gregorian_to_jdn(gy, 3, march) + (month - 1) * 31 \
        - _tdiv(month, 7) * (month - 7) + day - 1


@cnjit(signature_or_function='UniTuple(i8, 3)(i8)', cache=True)
def _jdn_to_iranian(jdn):
    gy, gm, gd = _jdn_to_gregorian(jdn)
    year = gy - GREGORIAN_OFFSET
    leap, gy, march, cycle = _iranian_leap(year)
    k = jdn - _gregorian_to_jdn(gy, 3, march)
    if k >= 0:
        if k <= 185:                    # Farvardin .. Shahrivar
            return (year, 1 + _tdiv(k, 31), _tmod(k, 31) + 1)
        k -= 186
    else:                               # before 1 Farvardin
        year -= 1
        k += 179
        if cycle == 1:                  # previous year was leap
            k += 1
    return (year, 7 + _tdiv(k, 30), _tmod(k, 30) + 1)


@cnjit(signature_or_function='i8[:](i8[:], i8[:], i8[:])', cache=True)
def _gregorian_to_jdn_array(years, months, days):
    out = np.empty(len(years), dtype=np.int64)
    for i in range(len(years)):
        out[i] = _gregorian_to_jdn(years[i], months[i], days[i])
    return out


@cnjit(signature_or_function='i8[:](i8[:], i8[:], i8[:])', cache=True)
def _iranian_to_jdn_array(years, months, days):
    out = np.empty(len(years), dtype=np.int64)
    for i in range(len(years)):
        out[i] = _iranian_to_jdn(years[i], months[i], days[i])
    return out


@cnjit(signature_or_function='i8[:, :](i8[:])', cache=True)
def _jdn_to_gregorian_array(jdn):
    out = np.empty((len(jdn), 3), dtype=np.int64)
    for i in range(len(jdn)):
        year, month, day = _jdn_to_gregorian(jdn[i])
        out[i, 0] = year
        out[i, 1] = month
        out[i, 2] = day
    return out


@cnjit(signature_or_function='i8[:, :](i8[:])', cache=True)
def _jdn_to_iranian_array(jdn):
    out = np.empty((len(jdn), 3), dtype=np.int64)
    for i in range(len(jdn)):
        year, month, day = _jdn_to_iranian(jdn[i])
        out[i, 0] = year
        out[i, 1] = month
        out[i, 2] = day
    return out


def gregorian_to_jdn(year, month, day):
    """
    Julian day number of a (proleptic) Gregorian date.

    The algorithm is based on D.A. Hatcher, Q.Jl.R.Astron.Soc. 25 (1984),
    53-55, slightly modified by K.M. Borkowski, Post.Astron. 25 (1987),
    275-279. It is valid from March 1, -100100 until a few million years
    into the future.

    Parameters
    ----------
    year : int

    month : int
        Normally 1-12. Other values roll over.
    day : int
        Normally 1-31. Other values roll over.

    Raises
    ------
    TypeError
        An argument is not an integer.

    Returns
    -------
    int
        The Julian day number.
    """
    return int(_gregorian_to_jdn(_index(year), _index(month), _index(day)))


def jdn_to_gregorian(jdn):
    """
    Reverse of gregorian_to_jdn.

    jdn_to_gregorian(gregorian_to_jdn(y, m, d)) is an invariant for valid
    dates.

    Parameters
    ----------
    jdn : int
        Julian day number.

    Returns
    -------
    GregorianDate
        (year, month, day)
    """
    year, month, day = _jdn_to_gregorian(_index(jdn))
    return GregorianDate(int(year), int(month), int(day))


def iranian_leap(year):
    """
    Leap year information of an Iranian year.

    Determines if the Iranian year is a leap year (366 days) and finds the
    Gregorian year and the day in March of 1 Farvardin of that year.

    Parameters
    ----------
    year : int
        Iranian year, -61 until 3177.

    Returns
    -------
    IranianLeapInfo
        is_leap : bool
            True if year has 366 days.
        march_day : int
            Day in March (Gregorian) of 1 Farvardin.
        gregorian_year : int
            Gregorian year in which the Iranian year starts.
        cycle_position : int
            Number of years since the last leap year (0-4).
    """
    is_leap, gy, march, cycle = _iranian_leap(_index(year))
    return IranianLeapInfo(bool(is_leap), int(march), int(gy), int(cycle))


def is_iranian_leapyear(year):
    return iranian_leap(year).is_leap


def iranian_to_jdn(year, month, day):
    """
    Julian day number of an Iranian (Jalali) date.

    Parameters
    ----------
    year : int
        Iranian year, -61 until 3177.
    month : int
        Normally 1-12. Other values roll over.
    day : int
        Normally 1-31. Other values roll over.

    Returns
    -------
    int
        The Julian day number.
    """
    return int(_iranian_to_jdn(_index(year), _index(month), _index(day)))


def jdn_to_iranian(jdn):
    """
    Reverse of iranian_to_jdn.

    Parameters
    ----------
    jdn : int
        Julian day number.

    Returns
    -------
    IranianDate
        (year, month, day)
    """
    year, month, day = _jdn_to_iranian(_index(jdn))
    return IranianDate(int(year), int(month), int(day))


def iranian_month_length(year, month):
    """
    Number of days in an Iranian month, -1 if month is not in 1..12.
    """
    if not 1 <= month <= 12:
        return -1
    if month == 12 and is_iranian_leapyear(year):
        return 30
    return imdays[month]


# 0 is monday, 1 is tuesday etc.
def weekday_nr(jdn):
    return _index(jdn) % 7


def _as_int64(*arrays):
    arrays = np.broadcast_arrays(*[np.asarray(a, dtype=np.int64)
                                   for a in arrays])
    shape = arrays[0].shape
    return shape, [np.ascontiguousarray(a).ravel() for a in arrays]


def gregorian_to_jdn_array(years, months, days):
    """
    Vectorized gregorian_to_jdn. The arguments are broadcast together.

    Returns
    -------
    numpy.ndarray
        int64 Julian day numbers with the broadcast shape.
    """
    shape, (y, m, d) = _as_int64(years, months, days)
    return _gregorian_to_jdn_array(y, m, d).reshape(shape)


def iranian_to_jdn_array(years, months, days):
    """
    Vectorized iranian_to_jdn. The arguments are broadcast together.

    Returns
    -------
    numpy.ndarray
        int64 Julian day numbers with the broadcast shape.
    """
    shape, (y, m, d) = _as_int64(years, months, days)
    return _iranian_to_jdn_array(y, m, d).reshape(shape)


def jdn_to_gregorian_array(jdn):
    """
    Vectorized jdn_to_gregorian.

    Returns
    -------
    numpy.ndarray
        int64 array of shape jdn.shape + (3,) holding year, month, day.
    """
    shape, (j,) = _as_int64(jdn)
    return _jdn_to_gregorian_array(j).reshape(shape + (3,))


def jdn_to_iranian_array(jdn):
    """
    Vectorized jdn_to_iranian.

    Returns
    -------
    numpy.ndarray
        int64 array of shape jdn.shape + (3,) holding year, month, day.
    """
    shape, (j,) = _as_int64(jdn)
    return _jdn_to_iranian_array(j).reshape(shape + (3,))


Engine = namedtuple("Engine", ["gregorian_to_jdn", "jdn_to_gregorian",
                               "iranian_to_jdn", "jdn_to_iranian",
                               "iranian_leap"])

ENGINE = Engine(gregorian_to_jdn, jdn_to_gregorian, iranian_to_jdn,
                jdn_to_iranian, iranian_leap)
