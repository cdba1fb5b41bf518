import sys
from typing import TypeVar, List, Tuple, NamedTuple, Sequence, Optional
from enum import Enum
from dataclasses import dataclass

T = TypeVar('T')

# Marks a memoization cell that has not been evaluated yet.
UNSET = sys.maxsize

DistanceMatrix = List[List[int]]


class LevenshteinError(Exception):
    pass


class InvalidDistanceMatrix(LevenshteinError, ValueError):
    def __init__(self, message: str = "Invalid distance matrix"):
        super().__init__(message)


class InvalidEditScript(LevenshteinError, ValueError):
    def __init__(self, message: str = "Invalid edit script"):
        super().__init__(message)


class OpType(str, Enum):
    INSERT = 'insert'
    DELETE = 'delete'
    SUBSTITUTE = 'substitute'


class Edit(NamedTuple):
    """One step of an edit script.

    ``position`` is 1-based for DELETE and SUBSTITUTE. For INSERT it is the
    number of source elements the value goes after, so 0 means the front.
    """
    op: OpType
    position: int
    value: object = None

    def __repr__(self) -> str:
        if self.op == OpType.DELETE:
            return f"Edit({self.op.value!r}, {self.position})"
        return f"Edit({self.op.value!r}, {self.position}, {self.value!r})"


EditScript = List[Edit]


def make_insert(position: int, value: T) -> Edit:
    return Edit(OpType.INSERT, position, value)


def make_delete(position: int) -> Edit:
    return Edit(OpType.DELETE, position)


def make_substitute(position: int, value: T) -> Edit:
    return Edit(OpType.SUBSTITUTE, position, value)


def get_distance_table(m: int, n: int, fill: int = UNSET) -> DistanceMatrix:
    """Table of shape (m+1) x (n+1) with the boundary row and column set.

    Row 0 is ``0..n`` and column 0 is ``0..m``; every other cell holds
    ``fill``.
    """
    table = [list(range(n + 1))]
    for i in range(1, m + 1):
        row = [fill] * (n + 1)
        row[0] = i
        table.append(row)
    return table


def matrix_shape(matrix: DistanceMatrix) -> Tuple[int, int]:
    if not matrix:
        return 0, 0
    return len(matrix), len(matrix[0])


def common_affix_lengths(source: Sequence[T], target: Sequence[T]) -> Tuple[int, int]:
    """Lengths of the longest common prefix and suffix.

    The suffix never overlaps the prefix, so both together never exceed the
    shorter sequence.
    """
    limit = min(len(source), len(target))
    prefix = 0
    while prefix < limit and source[prefix] == target[prefix]:
        prefix += 1
    suffix = 0
    while (suffix < limit - prefix
           and source[len(source) - 1 - suffix] == target[len(target) - 1 - suffix]):
        suffix += 1
    return prefix, suffix


def count_operations(script: EditScript) -> dict:
    counts = {
        'inserts': 0,
        'deletes': 0,
        'substitutes': 0,
        'total': len(script)
    }
    for edit in script:
        if edit.op == OpType.INSERT:
            counts['inserts'] += 1
        elif edit.op == OpType.DELETE:
            counts['deletes'] += 1
        elif edit.op == OpType.SUBSTITUTE:
            counts['substitutes'] += 1
    return counts


def script_to_tuples(script: EditScript) -> List[Tuple[str, int, object]]:
    return [(edit.op.value, edit.position, edit.value) for edit in script]


def tuples_to_script(tuples: List[Tuple]) -> EditScript:
    result = []
    for item in tuples:
        op = OpType(item[0])
        if op == OpType.DELETE:
            result.append(make_delete(item[1]))
        else:
            result.append(Edit(op, item[1], item[2]))
    return result


@dataclass
class DiffResult:
    source: Sequence
    target: Sequence
    distance: int
    matrix: Optional[DistanceMatrix]
    edits: EditScript

    @property
    def similarity_ratio(self) -> float:
        longest = max(len(self.source), len(self.target))
        if longest == 0:
            return 1.0
        return 1.0 - self.distance / longest

    @property
    def identical(self) -> bool:
        return self.distance == 0

    def counts(self) -> dict:
        return count_operations(self.edits)
