#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Nov 16 10:42:05 2024

Constants for the Gregorian <-> Iranian (Jalali) conversions.
"""

import numpy as np

# Break years of the Iranian leap cycle. Between two break years the leap
# years follow a 33 year sub-cycle.
BREAKS = np.array([-61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181, 1210,
                   1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178],
                  dtype=np.int64)
NBREAKS = len(BREAKS)

IRANIAN_MINYEAR = -61
IRANIAN_MAXYEAR = 3177
GREGORIAN_OFFSET = 621          # Iranian year + 621 = Gregorian year of 1/1

UNIX_EPOCH_JDN      = 2440588   # 1970-01-01
SPD                 = 86400     # seconds per day
MSPD                = SPD * 1000

mdays   = {1:31, 2:28, 3:31, 4:30, 5:31, 6:30, 7:31, 8:31, 9:30, 10:31,
           11:30, 12:31}
imdays  = {1:31, 2:31, 3:31, 4:31, 5:31, 6:31, 7:30, 8:30, 9:30, 10:30,
           11:30, 12:29}

imonths = {1: "فروردین", 2: "اردیبهشت", 3: "خرداد", 4: "تیر", 5: "مرداد",
           6: "شهریور", 7: "مهر", 8: "آبان", 9: "آذر", 10: "دی",
           11: "بهمن", 12: "اسفند"}

# Keyed by jdn % 7. JDN 0 (-4713-11-24, proleptic Gregorian) is a Monday.
iwdays  = {0: "دوشنبه", 1: "سه شنبه", 2: "چهارشنبه", 3: "پنج شنبه",
           4: "جمعه", 5: "شنبه", 6: "یکشنبه"}