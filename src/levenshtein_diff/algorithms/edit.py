import logging
from typing import TypeVar, List, Tuple, Sequence, Optional

from .utils import (
    DistanceMatrix, Edit, EditScript, OpType, DiffResult, InvalidDistanceMatrix, InvalidEditScript,
    make_insert, make_delete, make_substitute,
)
from .distance import DistanceEngine

T = TypeVar('T')

logger = logging.getLogger(__name__)

_REMOVED = object()


class EditScriptGenerator:
    """Backtracks a distance matrix from its last cell to the origin.

    When several predecessors give the same minimal cost the choice is
    insert, then delete, then substitute. Edits come out in traversal order,
    so positions near the end of the source are emitted first.
    """

    def __init__(self, source: Sequence[T], target: Sequence[T], matrix: DistanceMatrix):
        self.source = source
        self.target = target
        self.matrix = matrix
        self.path: List[Tuple[int, int]] = []

    def generate(self) -> EditScript:
        self._check_dimensions()
        matrix = self.matrix
        i, j = len(self.source), len(self.target)
        edits: EditScript = []
        self.path = [(i, j)]
        while i != 0 or j != 0:
            current = matrix[i][j]
            substitute = matrix[i - 1][j - 1] if i > 0 and j > 0 else None
            delete = matrix[i - 1][j] if i > 0 else None
            insert = matrix[i][j - 1] if j > 0 else None
            best = min(c for c in (substitute, delete, insert) if c is not None)
            if best == current and substitute == current:
                i -= 1
                j -= 1
            elif best == current - 1:
                if insert == best:
                    edits.append(make_insert(i, self.target[j - 1]))
                    j -= 1
                elif delete == best:
                    edits.append(make_delete(i))
                    i -= 1
                else:
                    edits.append(make_substitute(i, self.target[j - 1]))
                    i -= 1
                    j -= 1
            else:
                logger.debug("Inconsistent cell (%d, %d): value %r, best predecessor %r",
                             i, j, current, best)
                raise InvalidDistanceMatrix(
                    f"Cell ({i}, {j}) holds {current!r} but its cheapest predecessor is {best!r}")
            self.path.append((i, j))
        logger.debug("Generated %d edits for %d -> %d elements",
                     len(edits), len(self.source), len(self.target))
        return edits

    def _check_dimensions(self):
        rows = len(self.source) + 1
        cols = len(self.target) + 1
        if len(self.matrix) != rows:
            raise InvalidDistanceMatrix(
                f"Expected {rows} rows for a source of length {len(self.source)}, got {len(self.matrix)}")
        for row in self.matrix:
            if len(row) != cols:
                raise InvalidDistanceMatrix(
                    f"Expected {cols} columns for a target of length {len(self.target)}, got {len(row)}")


class EditApplier:
    """Replays an edit script against the source it was generated from.

    Deletes and substitutes only tombstone or overwrite slots, so their
    positions never shift. Inserts are deferred and applied from the highest
    position down, which keeps every recorded position valid.
    """

    def __init__(self, source: Sequence[T]):
        self.source = source

    def apply(self, edits: EditScript) -> List[T]:
        self._check_bounds(edits)
        buffer: list = list(self.source)
        inserts: List[Edit] = []
        for edit in reversed(edits):
            if edit.op == OpType.SUBSTITUTE:
                buffer[edit.position - 1] = edit.value
            elif edit.op == OpType.DELETE:
                buffer[edit.position - 1] = _REMOVED
            else:
                inserts.append(edit)
        for edit in reversed(inserts):
            buffer.insert(edit.position, edit.value)
        logger.debug("Applied %d edits (%d inserts) to %d elements",
                     len(edits), len(inserts), len(self.source))
        return [item for item in buffer if item is not _REMOVED]

    def _check_bounds(self, edits: EditScript):
        size = len(self.source)
        for index, edit in enumerate(edits):
            op = OpType(edit.op)
            low = 0 if op == OpType.INSERT else 1
            if not low <= edit.position <= size:
                raise InvalidEditScript(
                    f"Edit {index} ({op.value} at {edit.position}) is outside a source of length {size}")


def generate_edits(source: Sequence[T], target: Sequence[T], matrix: DistanceMatrix) -> EditScript:
    return EditScriptGenerator(source, target, matrix).generate()


def backtrack_path(source: Sequence[T], target: Sequence[T], matrix: DistanceMatrix) -> List[Tuple[int, int]]:
    generator = EditScriptGenerator(source, target, matrix)
    generator.generate()
    return generator.path


def apply_edits(source: Sequence[T], edits: EditScript) -> List[T]:
    return EditApplier(source).apply(edits)


def diff(source: Sequence[T], target: Sequence[T],
         engine: Optional[DistanceEngine] = None) -> DiffResult:
    engine = engine or DistanceEngine()
    dist, matrix = engine.compute(source, target)
    edits = generate_edits(source, target, matrix)
    return DiffResult(source=source, target=target, distance=dist, matrix=matrix, edits=edits)
