#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Nov 17 14:12:51 2024

IranianCalendar: a date held in both the Gregorian and the Iranian (Jalali)
calendar.

The state is a single Julian day number. The Gregorian and the Iranian dates
are always derived from it, so they can not disagree. The date can be set in
either calendar or moved by a number of days; all other properties (month
length, weekday, names) are computed when they are asked for.

By default dates are not validated. Out of range days and months roll over,
e.g. Esfand 35 is a date in Farvardin of the next year. Pass strict=True to
the constructors to get a ValueError instead.

An IranianCalendar is mutable. Do not share an instance between threads
without a lock.
"""

import re
import logging
import datetime
import numpy as np
from functools import total_ordering
from operator import index as _index
from zoneinfo import ZoneInfo
from irancal.jdnmath import ENGINE, iranian_leap
from irancal.constants import IRANIAN_MINYEAR, IRANIAN_MAXYEAR, \
    UNIX_EPOCH_JDN, MSPD, mdays, imdays, imonths, iwdays

logger = logging.getLogger(__name__)

UNIX_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


def is_gregorian_leapyear(year):
    """
    Check if a given year is a leap year in the (proleptic) Gregorian calendar

    Parameters
    ----------
    year : int

    Returns
    -------
    leapyear : Boolean
        True if year is a leap year
    """
    if year % 4 == 0:               # possibly leap
        if year % 400 == 0:         # leap
            leapyear = True
        else:
            if year % 100 == 0:     # common
                leapyear = False
            else:                   # leap
                leapyear = True
    else:
        leapyear = False
    return leapyear


def check_gregorian_date(year, month, day):
    """
    Validate a Gregorian date.

    Raises
    ------
    TypeError
        An argument is not an integer.
    ValueError
        Month or day out of range.

    Returns
    -------
    year, month, day
    """
    year = _index(year)
    month = _index(month)
    day = _index(day)
    if not 1 <= month <= 12:
        raise ValueError('month must be in 1..12', month)
    dmax = mdays[month]
    if month == 2 and is_gregorian_leapyear(year):
        dmax += 1
    if not 1 <= day <= dmax:
        raise ValueError('day must be in 1..%d' % dmax, day)
    return year, month, day


def check_iranian_date(year, month, day):
    """
    Validate an Iranian date.

    The year must be in the range of the leap year algorithm (-61..3177)
    and Esfand has 30 days in a leap year only.

    Raises
    ------
    TypeError
        An argument is not an integer.
    ValueError
        Year, month or day out of range.

    Returns
    -------
    year, month, day
    """
    year = _index(year)
    month = _index(month)
    day = _index(day)
    if not IRANIAN_MINYEAR <= year <= IRANIAN_MAXYEAR:
        raise ValueError('year must be in %d..%d' %
                         (IRANIAN_MINYEAR, IRANIAN_MAXYEAR), year)
    if not 1 <= month <= 12:
        raise ValueError('month must be in 1..12', month)
    dmax = imdays[month]
    if month == 12 and iranian_leap(year).is_leap:
        dmax += 1
    if not 1 <= day <= dmax:
        raise ValueError('day must be in 1..%d' % dmax, day)
    return year, month, day


def _tzinfo(tz):
    if tz is None or isinstance(tz, datetime.tzinfo):
        return tz
    if isinstance(tz, str):
        return ZoneInfo(tz)
    raise TypeError(f"tz must be a tzinfo, str or None, not {type(tz)}")


class CalendarMeta(type):
    def __init__(cls, name, bases, dct):
        cls.cname = name
        super().__init__(name, bases, dct)


@total_ordering
class IranianCalendar(metaclass=CalendarMeta):
    def __init__(self, jdn, time=None, engine=ENGINE):
        """
        A date in the Gregorian and the Iranian calendar.

        Parameters
        ----------
        jdn : int
            Julian day number.
        time : datetime.time or None
            Time of day. Stored as is, it does not take part in the date
            computations.
        engine : jdnmath.Engine
            The conversion functions. Defaults to jdnmath.ENGINE.
        """
        self.engine = engine
        self.time = time
        self.set_jdn(jdn)

    @classmethod
    def from_jdn(cls, jdn, time=None):
        return cls(jdn, time)

    @classmethod
    def from_gregorian(cls, year, month, day, time=None, strict=False):
        if strict:
            year, month, day = check_gregorian_date(year, month, day)
        return cls(ENGINE.gregorian_to_jdn(year, month, day), time)

    @classmethod
    def from_iranian(cls, year, month, day, time=None, strict=False):
        if strict:
            year, month, day = check_iranian_date(year, month, day)
        return cls(ENGINE.iranian_to_jdn(year, month, day), time)

    @classmethod
    def from_datetime(cls, dt):
        """
        Create from a datetime.datetime (the time of day is kept) or a
        datetime.date.
        """
        if isinstance(dt, datetime.datetime):
            return cls.from_gregorian(dt.year, dt.month, dt.day, dt.time())
        if isinstance(dt, datetime.date):
            return cls.from_gregorian(dt.year, dt.month, dt.day)
        raise TypeError(f"{cls.cname}: date or datetime expected, "
                        f"not {type(dt)}")

    @classmethod
    def fromisoformat(cls, timestamp):
        """
        Create from an ISO 8601 timestamp, e.g. 2025-01-01T12:04:38Z.

        The date and the time are taken as written; an offset is not
        applied.

        Raises
        ------
        TypeError
            timestamp is not a string.
        ValueError
            timestamp can not be parsed.
        """
        if not isinstance(timestamp, str):
            raise TypeError(f"must be str, not {type(timestamp)}")
        text = timestamp.strip()
        if text[-1:] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.datetime.fromisoformat(text)
        except ValueError:
            raise (ValueError(
                f"{cls.cname} Error parsing ISO timestamp {timestamp}")) \
                from None
        return cls.from_datetime(dt)

    @classmethod
    def fromtimestamp(cls, epoch_millis, tz=None):
        """
        Create from milliseconds since 1970-01-01 00:00 UTC.

        Parameters
        ----------
        epoch_millis : int
            Milliseconds since the Unix epoch.
        tz : tzinfo, str or None
            Time zone (or IANA zone name) in which the date is taken.
            None is the local time zone of the system.
        """
        utc = UNIX_EPOCH + datetime.timedelta(milliseconds=epoch_millis)
        return cls.from_datetime(utc.astimezone(_tzinfo(tz)))

    @classmethod
    def today(cls, tz=None):
        return cls.from_datetime(datetime.datetime.now(_tzinfo(tz)))

    def set_jdn(self, jdn):
        self.jdn = _index(jdn)
        self.gregorian = self.engine.jdn_to_gregorian(self.jdn)
        self.iranian = self.engine.jdn_to_iranian(self.jdn)
        logger.debug("jdn %d: gregorian %s iranian %s", self.jdn,
                     self.gregorian, self.iranian)
        return self

    def set_gregorian(self, year, month, day):
        """
        Set the date in the Gregorian calendar. The Iranian date follows.
        """
        return self.set_jdn(self.engine.gregorian_to_jdn(year, month, day))

    def set_iranian(self, year, month, day):
        """
        Set the date in the Iranian calendar. The Gregorian date follows.
        """
        return self.set_jdn(self.engine.iranian_to_jdn(year, month, day))

    def advance(self, days=1):
        """
        Move the date days ahead (back if days is negative).
        """
        return self.set_jdn(self.jdn + _index(days))

    def retreat(self, days=1):
        """
        Move the date days back (ahead if days is negative).
        """
        return self.set_jdn(self.jdn - _index(days))

    def copy(self):
        return type(self)(self.jdn, self.time, self.engine)

    @property
    def year(self):
        return self.iranian.year

    @property
    def month(self):
        return self.iranian.month

    @property
    def day(self):
        return self.iranian.day

    @property
    def gregorian_year(self):
        return self.gregorian.year

    @property
    def gregorian_month(self):
        return self.gregorian.month

    @property
    def gregorian_day(self):
        return self.gregorian.day

    @property
    def is_leap(self):
        return self.engine.iranian_leap(self.year).is_leap

    @property
    def month_length(self):
        """
        Number of days in the current Iranian month.
        """
        month = self.month
        if month < 7:
            return 31
        if month < 12:
            return 30
        if month == 12:
            return 30 if self.is_leap else 29
        return -1

    @property
    def day_of_year(self):
        month = self.month
        return (month - 1) * 31 - (month // 7) * (month - 7) + self.day

    @property
    def day_of_week(self):
        """
        0: Monday (دوشنبه) .. 6: Sunday (یکشنبه).
        """
        return self.jdn % 7

    @property
    def month_name(self):
        return imonths[self.month]

    @property
    def weekday_name(self):
        return iwdays[self.day_of_week]

    @property
    def local_time(self):
        if self.time is None:
            return ""
        return f"{self.time.hour:02d}:{self.time.minute:02d}"

    @property
    def short_date(self):
        return f"{self.year}/{self.month}/{self.day}"

    @property
    def gregorian_short_date(self):
        return f"{self.gregorian_year}/{self.gregorian_month}/" \
               f"{self.gregorian_day}"

    @property
    def friendly_date(self):
        return f"{self.day} {self.month_name} {self.year}"

    @property
    def friendly_date_with_weekday(self):
        return f"{self.weekday_name} {self.friendly_date}"

    @property
    def friendly_datetime(self):
        return f"{self.friendly_date} {self.local_time}".rstrip()

    def to_date(self):
        return datetime.date(*self.gregorian)

    def to_datetime(self):
        return datetime.datetime.combine(self.to_date(),
                                         self.time or datetime.time())

    def to_timestamp(self):
        """
        Milliseconds since the Unix epoch of the date at the stored time of
        day, taken as UTC.
        """
        t = self.time or datetime.time()
        ms = ((t.hour * 60 + t.minute) * 60 + t.second) * 1000 \
            + t.microsecond // 1000
        return (self.jdn - UNIX_EPOCH_JDN) * MSPD + ms

    def _strf(self):
        t = self.time or datetime.time()
        strf = {}
        strf["Y"] = f"{self.year}"
        strf["y"] = f"{self.year % 100:02d}"
        strf["m"] = f"{self.month:02d}"
        strf["d"] = f"{self.day:02d}"
        strf["e"] = f"{self.day: 2d}"
        strf["B"] = self.month_name
        strf["A"] = self.weekday_name
        strf["w"] = f"{self.day_of_week}"
        strf["j"] = f"{self.day_of_year:03d}"
        strf["H"] = f"{t.hour:02d}"
        strf["M"] = f"{t.minute:02d}"
        strf["S"] = f"{t.second:02d}"
        gy, gm, gd = self.gregorian
        strf["G"] = f"{gy:04d}-{gm:02d}-{gd:02d}"
        strf["%"] = "%"
        return strf

    def strftime(self, fmt):
        """
        Format the Iranian date.

        %Y year, %y year without century, %m month, %d day, %e day padded
        with a space, %B month name, %A weekday name, %w weekday number
        (0 is Monday), %j day of the year, %H %M %S time of day, %G the
        Gregorian date as YYYY-MM-DD and %% a literal %.

        Raises
        ------
        TypeError
            fmt is not a string.
        SyntaxError
            Unknown % escape.
        """
        if not isinstance(fmt, str):
            raise TypeError(f"must be str, not {type(fmt)}")
        strf = self._strf()

        def repl(escape):
            code = escape.group(0)[-1]
            if code in strf:
                return strf[code]
            raise (SyntaxError(f"Encountered invalid % escape ({code})"))
        return re.sub("%.", repl, fmt)

    def __format__(self, fmt):
        if not fmt:
            return str(self)
        return self.strftime(fmt)

    def __str__(self):
        return f"Gregorian {self.gregorian_short_date}\n" \
               f"Iranian {self.short_date}"

    def __repr__(self):
        return f"{self.cname}({self.year}, {self.month}, {self.day})"

    def __eq__(self, b):
        if isinstance(b, IranianCalendar):
            return self.jdn == b.jdn
        return NotImplemented

    def __lt__(self, b):
        if isinstance(b, IranianCalendar):
            return self.jdn < b.jdn
        return NotImplemented

    def __add__(self, b):
        if isinstance(b, (int, np.integer)):
            return type(self)(self.jdn + int(b), self.time, self.engine)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, b):
        if isinstance(b, IranianCalendar):
            return self.jdn - b.jdn
        if isinstance(b, (int, np.integer)):
            return type(self)(self.jdn - int(b), self.time, self.engine)
        return NotImplemented
