from trajsim.geogr.distances import point_euclidean_dist

from trajsim.similarity.frechet import frechet_distance
from trajsim.similarity.frechet import BandCoverageError
from trajsim.similarity.hausdorff import directed_hausdorff

import trajsim.geogr
import trajsim.similarity

from trajsim.__version__ import __version__
from .core import print_version

__all__ = [
    "point_euclidean_dist",
    "frechet_distance",
    "BandCoverageError",
    "directed_hausdorff",
    "print_version",
]
