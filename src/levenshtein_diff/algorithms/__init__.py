from .utils import (
    UNSET, DistanceMatrix, Edit, EditScript, OpType, DiffResult,
    LevenshteinError, InvalidDistanceMatrix, InvalidEditScript,
    make_insert, make_delete, make_substitute, get_distance_table,
    count_operations, script_to_tuples, tuples_to_script,
)
from .distance import (
    Strategy, EngineConfig, DistanceEngine,
    levenshtein_naive, levenshtein_tabulation, levenshtein_memoization,
    distance, edit_distance,
)
from .edit import EditScriptGenerator, EditApplier, generate_edits, apply_edits, backtrack_path, diff
