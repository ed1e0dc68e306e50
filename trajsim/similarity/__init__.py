from .distance_matrix import calculate_banded_distance_matrix
from .distance_matrix import core_diagonal

from .frechet import calculate_frechet_matrix
from .frechet import frechet_distance
from .frechet import frechet_path
from .frechet import BandCoverageError

from .hausdorff import directed_hausdorff

__all__ = [
    "calculate_banded_distance_matrix",
    "core_diagonal",
    "calculate_frechet_matrix",
    "frechet_distance",
    "frechet_path",
    "BandCoverageError",
    "directed_hausdorff",
]
