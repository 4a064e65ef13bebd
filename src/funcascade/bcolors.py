"""
Colors that can be used to change the text on the console
"""

OKBLUE = '\033[94m'
OKGREEN = '\033[92m'
YELLOW = '\033[93m'
ORANGE = '\033[38;5;208m'
FAIL = '\033[91m'
ENDC = '\033[0m'
BOLD = '\033[1m'

STAGE_COLORS = {1: OKGREEN, 2: YELLOW, 3: ORANGE}


def error(msg: str):
    """
    Wrap the message in red
    """

    return f"{FAIL}{BOLD}{msg}{ENDC}"


def warning(msg: str):
    return f"{YELLOW}{msg}{ENDC}"


def stage(msg: str, number: int):
    """
    Color the message by the algorithm that produced a result
    """

    return f"{STAGE_COLORS.get(number, OKBLUE)}{msg}{ENDC}"
