"""Levenshtein distance, minimal edit scripts and patching for any sequence."""

from .algorithms import (
    UNSET, DistanceMatrix, Edit, EditScript, OpType, DiffResult,
    LevenshteinError, InvalidDistanceMatrix, InvalidEditScript,
    make_insert, make_delete, make_substitute,
    count_operations, script_to_tuples, tuples_to_script,
    Strategy, EngineConfig, DistanceEngine,
    levenshtein_naive, levenshtein_tabulation, levenshtein_memoization,
    distance, edit_distance,
    EditScriptGenerator, EditApplier, generate_edits, apply_edits, backtrack_path, diff,
)

__version__ = "1.0.0"

__all__ = [
    "UNSET", "DistanceMatrix", "Edit", "EditScript", "OpType", "DiffResult",
    "LevenshteinError", "InvalidDistanceMatrix", "InvalidEditScript",
    "make_insert", "make_delete", "make_substitute",
    "count_operations", "script_to_tuples", "tuples_to_script",
    "Strategy", "EngineConfig", "DistanceEngine",
    "levenshtein_naive", "levenshtein_tabulation", "levenshtein_memoization",
    "distance", "edit_distance",
    "EditScriptGenerator", "EditApplier", "generate_edits", "apply_edits", "backtrack_path", "diff",
]
