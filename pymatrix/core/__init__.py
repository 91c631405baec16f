"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
matrix layer.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    layout: Storage-order constants and the process-wide storage order
    protocols: EliminationSolver protocol
    compute: Precision utilities and elimination kernels
"""

from pymatrix.core.protocols import EliminationSolver
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
)
from pymatrix.core.layout import (
    ROW_MAJOR,
    COL_MAJOR,
    storage_order,
    set_storage_order,
    use_storage_order,
)

__all__ = [
    # Protocols
    "EliminationSolver",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    # Layout
    "ROW_MAJOR",
    "COL_MAJOR",
    "storage_order",
    "set_storage_order",
    "use_storage_order",
]
