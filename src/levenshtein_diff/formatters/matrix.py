from typing import List, Set, Tuple

from ..algorithms.utils import DiffResult, DistanceMatrix
from ..algorithms.edit import backtrack_path
from .base import BaseFormatter, FormatterFactory, describe_value


def _require_matrix(result: DiffResult) -> DistanceMatrix:
    if result.matrix is None:
        raise ValueError("This result carries no distance matrix")
    return result.matrix


@FormatterFactory.register("plain")
class PlainMatrixFormatter(BaseFormatter):
    """One matrix row per line, cells separated by a space."""

    def _format_impl(self, result: DiffResult):
        for row in _require_matrix(result):
            self._writeln(" ".join(str(item) for item in row))


@FormatterFactory.register("table")
class TableMatrixFormatter(BaseFormatter):
    """Aligned grid labelled with the source (rows) and target (columns).

    Cells visited while backtracking are highlighted when colors are on.
    """

    EMPTY_LABEL = ''

    def _format_impl(self, result: DiffResult):
        matrix = _require_matrix(result)
        path: Set[Tuple[int, int]] = set()
        if self.config.highlight_path and self.config.use_color:
            path = set(backtrack_path(result.source, result.target, matrix))
        row_labels = [self.EMPTY_LABEL] + [describe_value(v) for v in result.source]
        col_labels = [self.EMPTY_LABEL] + [describe_value(v) for v in result.target]
        width = self._cell_width(matrix, col_labels)
        label_width = max(len(label) for label in row_labels)
        if self.config.show_headers:
            header = [" " * label_width] + [label.rjust(width) for label in col_labels]
            self._writeln(self._paint(" ".join(header), self.colors.bold))
        for i, row in enumerate(matrix):
            cells = []
            if self.config.show_headers:
                cells.append(self._paint(row_labels[i].rjust(label_width), self.colors.bold))
            for j, item in enumerate(row):
                text = str(item).rjust(width)
                if (i, j) in path:
                    text = self._paint(text, self.colors.cyan)
                cells.append(text)
            self._writeln(" ".join(cells))

    def _cell_width(self, matrix: DistanceMatrix, col_labels: List[str]) -> int:
        widest = max(len(str(item)) for row in matrix for item in row)
        if self.config.show_headers:
            widest = max(widest, max(len(label) for label in col_labels))
        return max(self.config.cell_width, widest)
