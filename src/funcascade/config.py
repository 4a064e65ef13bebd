"""
Configuration
=============
Central place for the table location and the numeric constants shared by
every algorithm level.

Exports:
    get_table_path(): Table file used when none is given on the
        command line. Taken from the FUNCASCADE_TABLE environment variable,
        falling back to 'dat_1.dat' in the working directory.
    EPSILON (float): Tolerance for exact matches and near-zero divisors.
    DOMAIN (tuple): Half-open interval [low, high) accepted by Tbl(x) and by
        the algorithm entry checks.
"""
import os

TABLE_ENV_VAR: str = "FUNCASCADE_TABLE"
DEFAULT_TABLE_NAME: str = "dat_1.dat"


def get_table_path(override: str | None = None) -> str:
    """
    Resolve the table file: explicit override, then environment, then default.
    """
    if override:
        return override
    return os.environ.get(TABLE_ENV_VAR) or os.path.join(os.getcwd(), DEFAULT_TABLE_NAME)


EPSILON: float = 1e-9
DOMAIN: tuple[float, float] = (-10.0, 10.0)

# Sample table and test vectors used by the `demo` command
DEMO_SAMPLES: list[tuple[float, float]] = [
    (-10.0, 23.5),
    (-5.0, 12.4),
    (0.0, 10.1),
    (5.0, 6.87),
    (10.0, 1.21),
]

DEMO_CASES: list[tuple[float, float, float]] = [
    (0.0, 2.0, 3.0),
    (15.0, 2.0, 3.0),
    (1.0, 0.5, 0.0),
    (-20.0, 1.0, 1.0),
]


def out_of_domain(x: float) -> bool:
    # NaN is not rejected here; it fails later in the table lookup
    return x < DOMAIN[0] or x >= DOMAIN[1]
