"""
PyMatrix: fixed-size matrices and small dense linear algebra for Python.

Matrices have their shape in their type (Matrix[3, 3]), a storage order
chosen once per process (row-major or column-major), and a complete set
of products, norms and homogeneous helpers. Inversion and determinants go
through a pluggable Gaussian-elimination solver.

Submodules:
    core: Exceptions, validation, storage-order configuration, solvers
    matrix: Matrix, Vector and the free-function algorithms
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pymatrix import core
from pymatrix import matrix
from pymatrix.matrix import Matrix, Vector

__all__ = [
    "__version__",
    "core",
    "matrix",
    "Matrix",
    "Vector",
]
