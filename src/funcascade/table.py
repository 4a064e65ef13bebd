"""
Lookup table
============
Piecewise-linear table of (x, y) samples read from a two-column text file,
and the shared handle the algorithms query it through.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, NamedTuple

import numpy as np

from . import config
from .errors import (
    EmptyTableError,
    InterpolationError,
    LoadFailure,
    RangeViolation,
    TableOrderError,
)

logger = logging.getLogger(__name__)


class Sample(NamedTuple):
    x: float
    y: float


def _read_pairs(text: str) -> list[Sample]:
    # Stops at the first token that is not a number; an unpaired trailing
    # value is dropped.
    values = []
    for token in text.split():
        try:
            values.append(float(token))
        except ValueError:
            break
    return [Sample(values[i], values[i + 1]) for i in range(0, len(values) - 1, 2)]


class LookupTable:
    """
    Immutable set of samples answering point and interpolated queries.

    Ordering is not validated on load. A table whose x values are not
    strictly increasing still answers exact matches, but refuses to
    interpolate (TableOrderError).
    """

    def __init__(self, samples: Iterable[tuple[float, float]], source: str | None = None):
        samples = [Sample(float(x), float(y)) for x, y in samples]
        self.source = source
        self.xs = np.array([s.x for s in samples], dtype=float)
        self.ys = np.array([s.y for s in samples], dtype=float)
        self.xs.flags.writeable = False
        self.ys.flags.writeable = False

        steps = np.diff(self.xs)
        unordered = np.flatnonzero(~(steps > 0))
        self.unordered_at: int | None = int(unordered[0]) + 1 if unordered.size else None

    @classmethod
    def parse(cls, text: str, source: str | None = None) -> LookupTable:
        return cls(_read_pairs(text), source=source)

    @classmethod
    def load(cls, path) -> LookupTable:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()
        except OSError as e:
            raise LoadFailure(str(path), e.strerror or type(e).__name__) from e
        except UnicodeDecodeError as e:
            raise LoadFailure(str(path), f"not a text file: {e.reason}") from e

        table = cls.parse(text, source=str(path))
        logger.info("Loaded %d samples from %s", len(table), path)
        if table.unordered_at is not None:
            logger.warning("Table %s is not sorted by x (row %d); interpolation disabled", path, table.unordered_at + 1)
        return table

    def __len__(self):
        return len(self.xs)

    def __iter__(self):
        for x, y in zip(self.xs, self.ys):
            yield Sample(float(x), float(y))

    @property
    def samples(self) -> list[Sample]:
        return list(self)

    @property
    def bounds(self) -> tuple[float, float]:
        if not len(self):
            raise EmptyTableError(self.source)
        return float(self.xs[0]), float(self.xs[-1])

    def query(self, x: float) -> float:
        # Exact sample points are returned as stored, without interpolation
        exact = np.flatnonzero(np.abs(self.xs - x) < config.EPSILON)
        if exact.size:
            return float(self.ys[exact[0]])

        if not len(self):
            raise EmptyTableError(self.source)

        low, high = self.bounds
        if x < low or x > high:
            raise RangeViolation(x, (low, high))

        if self.unordered_at is not None:
            raise TableOrderError(self.source, self.unordered_at)

        for i in range(len(self) - 1):
            x0, x1 = self.xs[i], self.xs[i + 1]
            if x0 <= x <= x1:
                y0, y1 = self.ys[i], self.ys[i + 1]
                return float(y0 + (y1 - y0) * (x - x0) / (x1 - x0))

        raise InterpolationError(x)


@dataclass
class SharedTable:
    """
    Explicitly passed handle owning one lazily loaded table.

    The first call to get() loads the file; later calls reuse it. A failed
    load is not remembered, so the next call tries again. No locking: load
    it before sharing between threads.
    """
    path: str
    _table: LookupTable | None = None

    @classmethod
    def preloaded(cls, table: LookupTable) -> SharedTable:
        return cls(path=table.source or "<memory>", _table=table)

    @property
    def loaded(self) -> bool:
        return self._table is not None

    def get(self) -> LookupTable:
        if self._table is None:
            logger.debug("Loading table from %s", self.path)
            self._table = LookupTable.load(self.path)
        return self._table

    def tbl(self, x: float) -> float:
        """Table value at x, restricted to the domain [-10, 10)."""
        table = self.get()
        if config.out_of_domain(x):
            raise RangeViolation(x, config.DOMAIN)
        return table.query(x)
