#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Nov 16 11:05:48 2024

Thin layer over numba. All kernels in irancal are declared with cnjit so
that compilation options live in one place.

Set NUMBA_DISABLE_JIT=1 in the environment to run the kernels as plain
Python (useful for debugging and coverage).
"""

import logging
import numba

logger = logging.getLogger(__name__)

numba_acc = not numba.config.DISABLE_JIT

logger.debug("numba %s, acceleration %s", numba.__version__,
             "enabled" if numba_acc else "disabled")


def cnjit(signature_or_function=None, **kwargs):
    """
    Compile a function in nopython mode.

    Parameters
    ----------
    signature_or_function : str, function or None
        numba signature, e.g. 'i8(i8, i8)', or the function itself when
        used as a bare decorator.
    **kwargs :
        Passed on to numba.njit (cache, fastmath, ...).

    Returns
    -------
    The numba dispatcher, or a decorator producing one.
    """
    return numba.njit(signature_or_function, **kwargs)
