"""
Cascade controller: Algorithm 1, then 2, then 3, until one returns a value.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum

from .algorithms import Escalation, algorithm1, algorithm2, algorithm3
from .table import SharedTable

logger = logging.getLogger(__name__)


class Stage(IntEnum):
    ALGORITHM_1 = 1
    ALGORITHM_2 = 2
    ALGORITHM_3 = 3

    def __str__(self):
        return f"Algorithm {self.value}"


@dataclass
class CascadeResult:
    value: float
    stage: Stage
    trail: list[str] = field(default_factory=list)

    @property
    def escalated(self) -> bool:
        return self.stage != Stage.ALGORITHM_1


def _move(result: CascadeResult, stage: Stage, why) -> None:
    message = f"{result.stage} -> {stage}: {why}"
    logger.info(message)
    result.trail.append(message)
    result.stage = stage


def evaluate(table: SharedTable, x: float, y: float, z: float) -> CascadeResult:
    """
    Compute fun(x, y, z), recording which algorithm produced the value.

    Never raises: anything Algorithm 1 or 2 cannot handle ends in
    Algorithm 3.
    """
    logger.debug("Computing fun(%g, %g, %g)", x, y, z)
    result = CascadeResult(value=float("nan"), stage=Stage.ALGORITHM_1)

    try:
        outcome = algorithm1(table, x, y, z)
    except Exception as e:
        _move(result, Stage.ALGORITHM_3, f"unexpected error: {e}")
    else:
        if not isinstance(outcome, Escalation):
            result.value = outcome
            return result
        # any escalation out of Algorithm 1 tries Algorithm 2 next; a load
        # failure fails there again and reaches Algorithm 3 through it
        _move(result, Stage.ALGORITHM_2, outcome)

    if result.stage == Stage.ALGORITHM_2:
        try:
            outcome = algorithm2(table, x, y, z)
        except Exception as e:
            _move(result, Stage.ALGORITHM_3, f"unexpected error: {e}")
        else:
            if not isinstance(outcome, Escalation):
                result.value = outcome
                return result
            _move(result, Stage.ALGORITHM_3, outcome)

    result.value = algorithm3(x, y, z)
    return result


def compute_fun(table: SharedTable, x: float, y: float, z: float) -> float:
    return evaluate(table, x, y, z).value
