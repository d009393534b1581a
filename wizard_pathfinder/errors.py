# errors.py
from typing import Optional, Tuple


class PathfinderError(Exception):
    """Base class for everything this package raises on purpose."""


class InputFormatError(PathfinderError, ValueError):
    def __init__(self, message: str, path: Optional[str] = None, line_no: Optional[int] = None):
        self.path = path
        self.line_no = line_no
        where = ""
        if path is not None:
            where = f"{path}:{line_no}: " if line_no is not None else f"{path}: "
        super().__init__(where + message)


class GridError(PathfinderError, KeyError):
    def __str__(self):
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class UnreachableDestinationError(PathfinderError, RuntimeError):
    def __init__(
        self,
        start: Tuple[int, int],
        destination: Tuple[int, int],
        objective_number: Optional[int] = None,
    ):
        self.start = start
        self.destination = destination
        self.objective_number = objective_number
        label = f"objective {objective_number}" if objective_number is not None else "destination"
        super().__init__(
            f"No path for {label}: {start[0]}-{start[1]} -> {destination[0]}-{destination[1]} "
            "is unreachable with the obstacles discovered so far."
        )
