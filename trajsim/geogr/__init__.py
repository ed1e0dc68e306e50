from .distances import point_euclidean_dist
from .distances import point_squared_euclidean_dist
from .distances import trajectory_to_array
from .distances import check_same_dimension
from .distances import check_float_dtype

__all__ = [
    "point_euclidean_dist",
    "point_squared_euclidean_dist",
    "trajectory_to_array",
    "check_same_dimension",
    "check_float_dtype",
]
