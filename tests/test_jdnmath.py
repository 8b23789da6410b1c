#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Nov 17 10:02:44 2024
"""


from irancal.jdnmath import *
from irancal.constants import mdays, imdays, IRANIAN_MINYEAR, IRANIAN_MAXYEAR
import numpy as np
import pytest


def _is_gregorian_leapyear(year):
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def test_gregorian_to_jdn():
    assert(gregorian_to_jdn(2025,   1, 11) == 2460687)
    assert(gregorian_to_jdn(2000,   1,  1) == 2451545)
    assert(gregorian_to_jdn(1999,   1,  1) == 2451180)
    assert(gregorian_to_jdn(1987,   1, 27) == 2446823)
    assert(gregorian_to_jdn(1987,   6, 19) == 2446966)
    assert(gregorian_to_jdn(1988,   1, 27) == 2447188)
    assert(gregorian_to_jdn(1988,   6, 19) == 2447332)
    assert(gregorian_to_jdn(1900,   1,  1) == 2415021)
    assert(gregorian_to_jdn(1858,  11, 17) == 2400001)
    assert(gregorian_to_jdn(1600,   1,  1) == 2305448)
    assert(gregorian_to_jdn(1600,  12, 31) == 2305813)
    assert(gregorian_to_jdn(1970,   1,  1) == 2440588)
    assert(gregorian_to_jdn(-4713, 11, 24) == 0)

def test_jdn_to_gregorian():
    assert(jdn_to_gregorian(2451545) == (2000, 1, 1))
    assert(jdn_to_gregorian(2460390) == (2024, 3, 20))
    assert(jdn_to_gregorian(0) == (-4713, 11, 24))
    assert(jdn_to_gregorian(-1) == (-4713, 11, 23))
    g = jdn_to_gregorian(2305813)
    assert(isinstance(g, GregorianDate))
    assert(g.year == 1600 and g.month == 12 and g.day == 31)

def test_gregorian_jdn_invariant():
    jdl = gregorian_to_jdn(-500, 1, 1)
    jdh = gregorian_to_jdn(2600, 1, 1)
    for jdn in range(jdl, jdh):
        assert(gregorian_to_jdn(*jdn_to_gregorian(jdn)) == jdn)

def test_gregorian_jdn_invariant_wide():
    jdl = gregorian_to_jdn(-100000, 3, 1)
    jdh = gregorian_to_jdn(1000000, 1, 1)
    for jdn in range(jdl, jdh, 9973):
        assert(gregorian_to_jdn(*jdn_to_gregorian(jdn)) == jdn)

def test_gregorian_date_invariant():
    for year in range(-1000, 3000, 7):
        for month in range(1, 13):
            dmax = mdays[month]
            if month == 2 and _is_gregorian_leapyear(year):
                dmax += 1
            for day in range(1, dmax + 1):
                assert(jdn_to_gregorian(gregorian_to_jdn(year, month, day))
                       == (year, month, day))

def test_gregorian_rollover():
    assert(gregorian_to_jdn(2024, 1, 35) == gregorian_to_jdn(2024, 2, 4))
    assert(gregorian_to_jdn(2024, 3, 0) == gregorian_to_jdn(2024, 2, 29))
    assert(gregorian_to_jdn(2024, 13, 1) == gregorian_to_jdn(2025, 1, 1))
    assert(jdn_to_gregorian(gregorian_to_jdn(2023, 2, 30)) == (2023, 3, 2))

def test_gregorian_types():
    with pytest.raises(TypeError) as excinfo:
        skip = gregorian_to_jdn(2024.0, 1, 1)
    with pytest.raises(TypeError) as excinfo:
        skip = jdn_to_gregorian("2451545")
    assert(gregorian_to_jdn(np.int32(2000), np.int64(1), 1) == 2451545)

def test_iranian_leap():
    info = iranian_leap(1403)
    assert(isinstance(info, IranianLeapInfo))
    assert(info.is_leap is True)
    assert(info.march_day == 20)
    assert(info.gregorian_year == 2024)
    assert(info.cycle_position == 0)
    info = iranian_leap(1404)
    assert(info.is_leap is False)
    assert(info.march_day == 21)
    assert(info.gregorian_year == 2025)
    assert(info.cycle_position == 1)

def test_is_iranian_leapyear():
    leap = [1370, 1375, 1379, 1383, 1387, 1391, 1395, 1399, 1403, 1408]
    for year in range(1370, 1410):
        assert(is_iranian_leapyear(year) == (year in leap))

def test_iranian_leap_pure():
    # the result does not depend on earlier queries
    first = iranian_leap(1403)
    for year in (-61, 9, 1210, 3177, 1404):
        iranian_leap(year)
    assert(iranian_leap(1403) == first)

def test_iranian_leap_out_of_range():
    # deterministic, no exception
    assert(iranian_leap(-500) == iranian_leap(-500))
    assert(iranian_leap(5000) == iranian_leap(5000))

def test_iranian_to_jdn():
    assert(iranian_to_jdn(1403, 1, 1) == gregorian_to_jdn(2024, 3, 20))
    assert(iranian_to_jdn(1404, 1, 1) == gregorian_to_jdn(2025, 3, 21))
    assert(iranian_to_jdn(1403, 12, 30) == gregorian_to_jdn(2025, 3, 20))
    assert(iranian_to_jdn(1399, 12, 30) == gregorian_to_jdn(2021, 3, 20))
    assert(iranian_to_jdn(1392, 2, 15) == gregorian_to_jdn(2013, 5, 5))
    assert(iranian_to_jdn(1357, 11, 22) == gregorian_to_jdn(1979, 2, 11))
    assert(iranian_to_jdn(1403, 7, 1) == gregorian_to_jdn(2024, 9, 22))

def test_jdn_to_iranian():
    assert(jdn_to_iranian(gregorian_to_jdn(2024, 3, 20)) == (1403, 1, 1))
    assert(jdn_to_iranian(gregorian_to_jdn(2024, 3, 19)) == (1402, 12, 29))
    assert(jdn_to_iranian(gregorian_to_jdn(2025, 3, 20)) == (1403, 12, 30))
    assert(jdn_to_iranian(gregorian_to_jdn(2025, 3, 21)) == (1404, 1, 1))
    assert(jdn_to_iranian(gregorian_to_jdn(2024, 9, 21)) == (1403, 6, 31))
    assert(jdn_to_iranian(gregorian_to_jdn(2024, 12, 31)) == (1403, 10, 11))
    d = jdn_to_iranian(2460390)
    assert(isinstance(d, IranianDate))
    assert(d.year == 1403 and d.month == 1 and d.day == 1)

def test_iranian_jdn_invariant():
    for year in range(IRANIAN_MINYEAR, IRANIAN_MAXYEAR + 1):
        leap = is_iranian_leapyear(year)
        for month in range(1, 13):
            dmax = imdays[month]
            if month == 12 and leap:
                dmax += 1
            for day in range(1, dmax + 1):
                jdn = iranian_to_jdn(year, month, day)
                assert(jdn_to_iranian(jdn) == (year, month, day))

def test_iranian_years_contiguous():
    for year in range(IRANIAN_MINYEAR, IRANIAN_MAXYEAR):
        length = iranian_to_jdn(year + 1, 1, 1) - iranian_to_jdn(year, 1, 1)
        assert(length == (366 if is_iranian_leapyear(year) else 365))

def test_iranian_rollover():
    assert(iranian_to_jdn(1403, 12, 35) == iranian_to_jdn(1404, 1, 5))
    assert(jdn_to_iranian(iranian_to_jdn(1404, 12, 30)) == (1405, 1, 1))
    assert(jdn_to_iranian(iranian_to_jdn(1403, 1, 32)) == (1403, 2, 1))

def test_iranian_month_length():
    assert(iranian_month_length(1403, 1) == 31)
    assert(iranian_month_length(1403, 6) == 31)
    assert(iranian_month_length(1403, 7) == 30)
    assert(iranian_month_length(1403, 11) == 30)
    assert(iranian_month_length(1403, 12) == 30)
    assert(iranian_month_length(1404, 12) == 29)
    assert(iranian_month_length(1404, 13) == -1)

def test_weekday_nr():
    assert(weekday_nr(0) == 0)                                # monday
    assert(weekday_nr(gregorian_to_jdn(2024, 3, 20)) == 2)    # wednesday
    assert(weekday_nr(gregorian_to_jdn(2025, 1, 12)) == 6)    # sunday
    assert(weekday_nr(-1) == 6)

def test_arrays():
    jdn = np.arange(gregorian_to_jdn(2020, 1, 1), gregorian_to_jdn(2026, 1, 1))
    ir = jdn_to_iranian_array(jdn)
    gr = jdn_to_gregorian_array(jdn)
    assert(ir.shape == (len(jdn), 3))
    assert(gr.shape == (len(jdn), 3))
    for i in range(0, len(jdn), 17):
        assert(tuple(ir[i]) == jdn_to_iranian(int(jdn[i])))
        assert(tuple(gr[i]) == jdn_to_gregorian(int(jdn[i])))
    assert(np.array_equal(iranian_to_jdn_array(ir[:, 0], ir[:, 1], ir[:, 2]),
                          jdn))
    assert(np.array_equal(gregorian_to_jdn_array(gr[:, 0], gr[:, 1], gr[:, 2]),
                          jdn))

def test_arrays_broadcast():
    days = np.arange(1, 32)
    jdn = iranian_to_jdn_array(1403, 1, days)
    assert(jdn.shape == (31,))
    assert(jdn[0] == iranian_to_jdn(1403, 1, 1))
    assert(np.all(np.diff(jdn) == 1))
    assert(iranian_to_jdn_array(1403, 1, 1).shape == ())
    assert(tuple(jdn_to_iranian_array(2460390)) == (1403, 1, 1))

def test_engine():
    assert(ENGINE.gregorian_to_jdn is gregorian_to_jdn)
    assert(ENGINE.jdn_to_iranian is jdn_to_iranian)
    assert(ENGINE.iranian_leap(1403).is_leap)
