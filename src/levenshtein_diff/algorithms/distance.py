import logging
from typing import TypeVar, List, Tuple, Sequence, Optional
from enum import Enum
from dataclasses import dataclass, replace

from .utils import DistanceMatrix, UNSET, get_distance_table, common_affix_lengths

T = TypeVar('T')

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    NAIVE = 'naive'
    TABULATION = 'tabulation'
    MEMOIZATION = 'memoization'


@dataclass
class EngineConfig:
    strategy: Strategy = Strategy.TABULATION
    trim_affixes: bool = True

    def __post_init__(self):
        self.strategy = Strategy(self.strategy)

    def copy(self) -> 'EngineConfig':
        return replace(self)

    def with_strategy(self, strategy: Strategy) -> 'EngineConfig':
        return replace(self, strategy=Strategy(strategy))

    def with_trim_affixes(self, trim_affixes: bool) -> 'EngineConfig':
        return replace(self, trim_affixes=trim_affixes)


def levenshtein_naive(source: Sequence[T], target: Sequence[T]) -> int:
    """Edit distance by plain recursion, O(3^n).

    Only meant as a reference for checking the other variants on short
    inputs.
    """
    def helper(i: int, j: int) -> int:
        if i == 0 or j == 0:
            return max(i, j)
        k = 0 if source[i - 1] == target[j - 1] else 1
        delete = helper(i - 1, j) + 1
        insert = helper(i, j - 1) + 1
        substitute = helper(i - 1, j - 1) + k
        return min(delete, insert, substitute)

    return helper(len(source), len(target))


def levenshtein_tabulation(source: Sequence[T], target: Sequence[T]) -> Tuple[int, DistanceMatrix]:
    m, n = len(source), len(target)
    distances = get_distance_table(m, n)
    for i in range(1, m + 1):
        prev = distances[i - 1]
        row = distances[i]
        item = source[i - 1]
        for j in range(1, n + 1):
            k = 0 if item == target[j - 1] else 1
            row[j] = min(prev[j] + 1, row[j - 1] + 1, prev[j - 1] + k)
    return distances[m][n], distances


def levenshtein_memoization(source: Sequence[T], target: Sequence[T]) -> Tuple[int, DistanceMatrix]:
    """Top-down evaluation of the recurrence, caching into the matrix.

    Cells start at UNSET and are evaluated once. The pending cells are kept
    on an explicit stack instead of the call stack, so long inputs do not
    hit the interpreter recursion limit.
    """
    m, n = len(source), len(target)
    distances = get_distance_table(m, n)
    stack: List[Tuple[int, int]] = [(m, n)]
    while stack:
        i, j = stack[-1]
        if distances[i][j] != UNSET:
            stack.pop()
            continue
        pending = [(a, b) for a, b in ((i - 1, j), (i, j - 1), (i - 1, j - 1))
                   if distances[a][b] == UNSET]
        if pending:
            stack.extend(pending)
            continue
        stack.pop()
        k = 0 if source[i - 1] == target[j - 1] else 1
        delete = distances[i - 1][j] + 1
        insert = distances[i][j - 1] + 1
        substitute = distances[i - 1][j - 1] + k
        distances[i][j] = min(delete, insert, substitute)
    return distances[m][n], distances


class DistanceEngine:
    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    @property
    def strategy(self) -> Strategy:
        return self.config.strategy

    def compute(self, source: Sequence[T], target: Sequence[T]) -> Tuple[int, DistanceMatrix]:
        """Distance plus the full (len(source)+1) x (len(target)+1) matrix."""
        if self.strategy == Strategy.NAIVE:
            raise ValueError("The naive strategy does not build a distance matrix")
        dist, matrix = self._run_dp(source, target)
        logger.debug("%s: %dx%d matrix, distance %d",
                     self.strategy.value, len(source) + 1, len(target) + 1, dist)
        return dist, matrix

    def distance(self, source: Sequence[T], target: Sequence[T]) -> int:
        prefix = suffix = 0
        if self.config.trim_affixes:
            prefix, suffix = common_affix_lengths(source, target)
            source = source[prefix:len(source) - suffix]
            target = target[prefix:len(target) - suffix]
        if self.strategy == Strategy.NAIVE:
            dist = levenshtein_naive(source, target)
        else:
            dist, _ = self._run_dp(source, target)
        logger.debug("%s: trimmed prefix %d, suffix %d, core %dx%d, distance %d",
                     self.strategy.value, prefix, suffix, len(source), len(target), dist)
        return dist

    def naive_distance(self, source: Sequence[T], target: Sequence[T]) -> int:
        return levenshtein_naive(source, target)

    def _run_dp(self, source: Sequence[T], target: Sequence[T]) -> Tuple[int, DistanceMatrix]:
        if self.strategy == Strategy.MEMOIZATION:
            return levenshtein_memoization(source, target)
        return levenshtein_tabulation(source, target)


def distance(source: Sequence[T], target: Sequence[T]) -> Tuple[int, DistanceMatrix]:
    return DistanceEngine().compute(source, target)


def edit_distance(source: Sequence[T], target: Sequence[T]) -> int:
    return DistanceEngine().distance(source, target)
