import logging

import numpy as np
from shapely.geometry import LineString

import trajsim as ts
from trajsim.similarity import calculate_frechet_matrix, frechet_path


logging.basicConfig(level=logging.DEBUG)

# A walk along the x-axis and a coarser, shifted copy of it.
rng = np.random.default_rng(0)
x = np.linspace(0, 10, 50)
walk = np.column_stack([x, np.cumsum(rng.normal(scale=0.2, size=50))])
coarse = LineString(walk[::3] + [0.0, 0.5])

print("Frechet distance:", ts.frechet_distance(walk, coarse))

# The Hausdorff distance is directed, the symmetric version is the maximum of both directions.
h_01 = ts.directed_hausdorff(walk, coarse, rng=rng)
h_10 = ts.directed_hausdorff(coarse, walk, rng=rng)
print("Directed Hausdorff distances:", h_01, h_10)
print("Hausdorff distance:", max(h_01, h_10))

# The coupled point pairs. Rows belong to the longer trajectory.
path = frechet_path(calculate_frechet_matrix(walk, coarse))
print("Coupling of", len(path), "point pairs:", path[:5].tolist(), "...")
