import logging
import os
import sys
import tempfile

from . import bcolors
from . import config
from . import console
from .algorithms import Escalation, algorithm1, algorithm2, algorithm3
from .cascade import CascadeResult, Stage, compute_fun, evaluate
from .errors import CascadeError
from .logging_config import setup_logging
from .table import LookupTable, Sample, SharedTable

__version__ = console.__version__

logger = logging.getLogger(__name__)

COMMANDS = ["demo", "table", "help", "quit", "quit()", "exit"]

VERBOSE_FLAGS = ["-v", "--verbose"]

LOG_FLAG = "--log"


def isfloat(num):
    try:
        float(num)
        return True
    except ValueError:
        return False


def run_demo():
    """
    Write the sample table to a temporary file and run the demo vectors
    through the cascade.
    """
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, config.DEFAULT_TABLE_NAME)
        with open(path, 'w') as f:
            f.write("\n".join(f"{x:g} {y:g}" for x, y in config.DEMO_SAMPLES))

        table = SharedTable(path)
        rows = []
        for x, y, z in config.DEMO_CASES:
            print(f"\n--- Test: x={x:g}, y={y:g}, z={z:g} ---")
            result = evaluate(table, x, y, z)
            console.print_result(x, y, z, result)
            rows.append(((x, y, z), result))

    print()
    print(console.results_table(rows))
    return rows


def handler(table: SharedTable, inpt: str) -> bool:
    """
    Run one line of input. Returns False when the session should end.
    """
    args = inpt.split()
    if not args:
        return True
    cmd = args[0]

    try:
        if cmd in ("quit", "quit()", "exit"):
            return False
        elif cmd == "help":
            print(help_text)
        elif cmd == "demo":
            run_demo()
        elif cmd == "table":
            print(f"Table {table.path}")
            print(console.samples_table(table.get()))
        elif isfloat(cmd):
            if float(cmd) == -1:
                return False
            if len(args) != 3 or not all(isfloat(arg) for arg in args):
                print(bcolors.warning("Expected three numbers: x y z"))
                return True
            x, y, z = (float(arg) for arg in args)
            console.print_result(x, y, z, evaluate(table, x, y, z))
        else:
            print(f"Command {cmd} not found. Type 'help' for a list of commands.")
    except CascadeError as err:
        console.print_error(err)
    return True


help_text = """
Commands:
    x y z
        Compute fun(x, y, z) with the algorithm cascade.

    -1
        Exit the program.

    table
        Print the samples of the loaded table.

    demo
        Run the built-in sample table and test vectors.

    help
        Print this help text.

    quit
    quit()
    exit
        Exit the program.
"""


def interpreter(table: SharedTable):
    while True:
        try:
            inpt = input("\nEnter x y z (or -1 to exit): ")
        except EOFError:
            print()
            break
        if not handler(table, inpt):
            break
    print("Program finished.")


def parse_args(args: list[str]) -> tuple[str, list[str]]:
    # args example: `data.dat demo table`
    # the table path is optional; anything known as a command is not a path
    if len(args) == 0:
        return config.get_table_path(), []

    first = args[0].split()
    if args[0] in COMMANDS or (first and isfloat(first[0])):
        return config.get_table_path(), list(args)

    return config.get_table_path(args[0]), list(args[1:])


def pop_option(args: list[str], flag: str) -> str | None:
    """
    Remove `flag VALUE` from args and return VALUE (None if absent).
    """
    if flag not in args:
        return None
    i = args.index(flag)
    if i + 1 >= len(args):
        raise SystemExit(f"{flag} expects a file name")
    value = args[i + 1]
    del args[i:i + 2]
    return value


def main(args=sys.argv[1:]):
    args = list(args)
    log_file = pop_option(args, LOG_FLAG)
    verbose = any(arg in VERBOSE_FLAGS for arg in args)
    args = [arg for arg in args if arg not in VERBOSE_FLAGS]
    setup_logging(logging.DEBUG if verbose else logging.INFO, log_file=log_file)

    console.print_welcome_message()

    table_path, commands = parse_args(args)
    table = SharedTable(table_path)
    logger.debug("Using table %s", table_path)

    # Commands given on the command line run once, without the interpreter
    for command in commands:
        print(">>> " + command)
        if not handler(table, command):
            return

    if commands:
        return

    interpreter(table)
