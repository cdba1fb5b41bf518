import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from helpers.reference import (
    reference_distance,
    sequential_apply,
    MatrixVerifier,
)


__all__ = [
    "reference_distance",
    "sequential_apply",
    "MatrixVerifier",
]
