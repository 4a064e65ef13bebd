"""
Algorithm levels of fun(x, y, z).

Algorithm 1 (krl -> nrl -> grl -> algorithm1) is floor based and escalates;
Algorithm 2 (kr12 -> nr12 -> gr12 -> algorithm2) is continuous and recovers
most conditions in place; Algorithm 3 is closed form and cannot fail.

Escalations are returned as Escalation values, never raised. Table failures
arrive as exceptions and are turned into Escalation values at the
algorithm1/algorithm2 boundary.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

import numpy as np

from . import config
from . import errors as err
from .errors import DivideByZeroError, LoadFailure, RangeViolation
from .table import SharedTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Escalation:
    """Request to abandon the current algorithm and continue with `target`."""
    target: int
    reason: str = ""

    def __str__(self):
        if self.reason:
            return f"Switch to Algorithm {self.target} ({self.reason})"
        return f"Switch to Algorithm {self.target}"


Outcome = Union[float, Escalation]


def _near_zero(value: float) -> bool:
    return abs(value) < config.EPSILON


def _substitute(error: DivideByZeroError, x: float, y: float, z: float) -> float:
    logger.warning("%s, using alternative value", error)
    if _near_zero(x):
        return float(np.floor(y + z))
    return x + 1


# Algorithm 1

@err.add_trace
def krl(table: SharedTable, x: float, y: float, z: float) -> float:
    if x > 0 and y <= 1:
        if _near_zero(z):
            return _substitute(DivideByZeroError("krl", z), x, y, z)
        return float(np.floor(table.tbl(x) + table.tbl(y) / z))
    elif y > 1:
        if _near_zero(x):
            return _substitute(DivideByZeroError("krl", x), x, y, z)
        return float(np.floor(table.tbl(y) + table.tbl(z) / x))
    elif x <= 0:
        if _near_zero(y):
            return _substitute(DivideByZeroError("krl", y), x, y, z)
        return float(np.floor(table.tbl(z) + table.tbl(x) / y))
    # only reachable with NaN arguments
    return 0.0


@err.add_trace
def nrl(table: SharedTable, x: float, y: float) -> float:
    if x > y:
        return 0.42 * krl(table, x, y, x)
    return 0.57 * krl(table, y, x, y) - 0.42 * krl(table, y, y, y)


@err.add_trace
def grl(table: SharedTable, x: float, y: float, z: float) -> Outcome:
    base = float(np.floor(x + y))
    if base == np.floor(z):
        return Escalation(2, f"floor({x:g} + {y:g}) == floor({z:g})")

    if x + y >= z:
        return base + 0.4 * nrl(table, x, z) + 0.6 * nrl(table, y, z)
    return base + 1.4 * nrl(table, x, z) - 0.4 * nrl(table, y * nrl(table, y, 1), z)


def algorithm1(table: SharedTable, x: float, y: float, z: float) -> Outcome:
    if config.out_of_domain(x):
        return Escalation(2, f"x={x:g} outside [{config.DOMAIN[0]:g}, {config.DOMAIN[1]:g})")

    try:
        total = 0.0
        for weight, args in ((x, (x, y, z)), (y, (y, z, x)), (z, (z, x, y))):
            value = grl(table, *args)
            if isinstance(value, Escalation):
                return value
            total += weight * value
        return total
    except LoadFailure as e:
        logger.info("Algorithm 1: %s", e)
        return Escalation(3, str(e))
    except RangeViolation as e:
        logger.info("Algorithm 1: %s", e)
        return Escalation(2, str(e))


# Algorithm 2

@err.add_trace
def kr12(table: SharedTable, x: float, y: float, z: float) -> float:
    if x > 0 and not _near_zero(z):
        return table.tbl(x) + table.tbl(y) / z
    elif x < 0 and y > 1 and not _near_zero(x):
        return table.tbl(y) + table.tbl(z) / x
    elif x <= 0 and y <= 1 and not _near_zero(y):
        return table.tbl(z) + table.tbl(x) / y
    return _substitute(DivideByZeroError("kr12"), x, y, z)


@err.add_trace
def nr12(table: SharedTable, x: float, y: float) -> float:
    norm = float(np.hypot(x, y))
    if _near_zero(norm):
        logger.error("Division by zero in nr12 (norm of (%g, %g)), using -0.05", x, y)
        return -0.05

    if x > y:
        return 0.42 * kr12(table, x / norm, y / norm, x / norm)
    return 0.57 * kr12(table, y / norm, x / norm, y / norm)


@err.add_trace
def gr12(table: SharedTable, x: float, y: float, z: float) -> float:
    if x + y >= z:
        return x + y + 0.3 * nr12(table, x, z) + 0.7 * nr12(table, y, z)
    return x + y + 1.3 * nr12(table, x, z) - 0.3 * nr12(table, y, z)


def algorithm2(table: SharedTable, x: float, y: float, z: float) -> Outcome:
    if config.out_of_domain(x):
        logger.warning("Algorithm 2: x=%g out of range, using |x|/10", x)
        return abs(x) / 10.0

    try:
        return (x * gr12(table, x, y, z)
                + y * gr12(table, x, y, z)
                + y * gr12(table, z, y, x)
                - x * y * z * gr12(table, y, x, z))
    except LoadFailure as e:
        logger.info("Algorithm 2: %s", e)
        return Escalation(3, str(e))


# Algorithm 3

def algorithm3(x: float, y: float, z: float) -> float:
    return 1.3498 * z + 2.2362 * y - 2.348 * x * y
