import functools


class CascadeError(Exception):
    def kind(self) -> str:
        raise NotImplementedError("Subclasses must implement this method")

    def context(self) -> str | None:
        raise NotImplementedError("Subclasses must implement this method")

    def message(self) -> str:
        raise NotImplementedError("Subclasses must implement this method")

    def notes(self) -> list[str]:
        if hasattr(self, "notes_"):
            return self.notes_
        else:
            return []

    def with_note(self, note: str):
        if hasattr(self, "notes_"):
            self.notes_.append(note)
        else:
            self.notes_ = [note]
        return self

    def __str__(self):
        if self.context() is not None:
            return f"{self.kind()} {self.context()}: {self.message()}"
        else:
            return f"{self.kind()}: {self.message()}"


class LoadFailure(CascadeError):
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason

    def kind(self) -> str:
        return "LoadFailure"

    def context(self) -> str | None:
        return f"in {self.path}"

    def message(self) -> str:
        if self.reason:
            return f"Can't open table file ({self.reason})"
        return "Can't open table file"


class RangeViolation(CascadeError):
    def __init__(self, value: float, bounds: tuple[float, float] | None = None):
        self.value = value
        self.bounds = bounds

    def kind(self) -> str:
        return "RangeViolation"

    def context(self) -> str | None:
        if self.bounds is None:
            return None
        return f"for [{self.bounds[0]:g}, {self.bounds[1]:g}]"

    def message(self) -> str:
        return f"Value {self.value:g} out of range"


class DivideByZeroError(CascadeError):
    def __init__(self, location: str, divisor: float = 0.0):
        self.location = location
        self.divisor = divisor

    def kind(self) -> str:
        return "DivideByZeroError"

    def context(self) -> str | None:
        return f"in {self.location}"

    def message(self) -> str:
        return f"Cannot divide by {self.divisor:g}"


class EmptyTableError(CascadeError):
    def __init__(self, source: str | None = None):
        self.source = source

    def kind(self) -> str:
        return "EmptyTableError"

    def context(self) -> str | None:
        return f"in {self.source}" if self.source else None

    def message(self) -> str:
        return "No data loaded"


class InterpolationError(CascadeError):
    def __init__(self, value: float):
        self.value = value

    def kind(self) -> str:
        return "InterpolationError"

    def context(self) -> str | None:
        return None

    def message(self) -> str:
        return f"No bracketing samples for {self.value}"


class TableOrderError(CascadeError):
    def __init__(self, source: str | None, index: int):
        self.source = source
        self.index = index

    def kind(self) -> str:
        return "TableOrderError"

    def context(self) -> str | None:
        return f"in {self.source}" if self.source else None

    def message(self) -> str:
        return f"Sample x values are not strictly increasing (at row {self.index + 1})"


def add_trace(function):
    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except CascadeError as e:
            raise e.with_note(f"In {function.__name__}")
    return wrapper
