from importlib.metadata import PackageNotFoundError, version

from beautifultable import BeautifulTable

from . import bcolors

try:
    __version__ = version("funcascade")
except PackageNotFoundError:
    # running from a source checkout
    __version__ = "0+unknown"


def print_welcome_message():
    print("funcascade " + __version__)
    print("Type 'help' for a list of commands, or enter x y z to compute fun(x, y, z).")
    print("-"*80)


def print_error(error):
    notes = ''.join(list(map(lambda note: f"\n  - {note}", error.notes())))
    if error.context() is None:
        print(f"{bcolors.error(error.kind())}: {error.message()}{notes}")
    else:
        print(f"{bcolors.error(error.kind())} {error.context()}: {error.message()}{notes}")


def print_result(x, y, z, result):
    value = bcolors.stage(f"{result.value:g}", int(result.stage))
    print(f"fun({x:g}, {y:g}, {z:g}) = {value}  [{result.stage}]")


def samples_table(table) -> BeautifulTable:
    out = BeautifulTable()
    out.columns.header = ["#", "x", "y"]
    for i, sample in enumerate(table, start=1):
        out.rows.append([i, sample.x, sample.y])
    return out


def results_table(rows) -> BeautifulTable:
    """
    rows: iterable of ((x, y, z), CascadeResult)
    """
    out = BeautifulTable()
    out.columns.header = ["x", "y", "z", "Algorithm", "fun(x, y, z)"]
    for (x, y, z), result in rows:
        out.rows.append([x, y, z, int(result.stage), f"{result.value:.6g}"])
    return out
