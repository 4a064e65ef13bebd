"""Sample tables shared by the tests."""

import os

# The table the original demo writes to dat_1.dat
DEMO_SAMPLES = [(-10, 23.5), (-5, 12.4), (0, 10.1), (5, 6.87), (10, 1.21)]

DEMO_TEXT = "-10 23.5\n-5 12.4\n0 10.1\n5 6.87\n10 1.21"

UNSORTED_SAMPLES = [(0, 1.0), (-5, 2.0), (10, 3.0)]


def write_table(directory, samples, name="dat_1.dat"):
    """Write samples as a two-column file and return its path."""
    path = os.path.join(str(directory), name)
    with open(path, 'w') as f:
        for x, y in samples:
            f.write(f"{x} {y}\n")
    return path


def missing_path(directory):
    return os.path.join(str(directory), "does_not_exist.dat")
