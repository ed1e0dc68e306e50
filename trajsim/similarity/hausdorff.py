import logging

import numpy as np

from trajsim.geogr.distances import check_same_dimension, point_squared_euclidean_dist, trajectory_to_array


def directed_hausdorff(t0, t1, rng=None, dtype=np.float64):
    """
    Compute the directed Hausdorff distance from trajectory t0 to trajectory t1.

    This is the largest distance from a point of t0 to its nearest neighbour in t1. The points of both
    trajectories are visited in random order and the nearest neighbour search of a point is stopped as
    soon as a distance below the current maximum is found, as this point can no longer change the
    result [1]_.

    Parameters
    ----------
    t0 : array_like, shapely geometry, GeoSeries or GeoDataFrame
        The trajectory the distance is measured from, with n0 >= 1 points.

    t1 : array_like, shapely geometry, GeoSeries or GeoDataFrame
        The trajectory the distance is measured to, with n1 >= 1 points of the same dimension as t0.

    rng : None, int or numpy.random.Generator, optional
        Source of the visiting order, passed to ``numpy.random.default_rng``. None draws fresh entropy.
        The result does not depend on the order, only the run time does.

    dtype : numpy floating dtype, default np.float64
        Precision of the computation.

    Returns
    -------
    numpy floating scalar
        The directed Hausdorff distance h(t0, t1).

    Raises
    ------
    ValueError
        If a trajectory is empty or the point dimensions differ.

    Notes
    -----
    The measure is not symmetric. The (undirected) Hausdorff distance is
    ``max(directed_hausdorff(t0, t1), directed_hausdorff(t1, t0))``.

    Distances are compared squared, the square root is only taken of the result.

    References
    ----------
    .. [1] Taha, A. A., & Hanbury, A. (2015). An efficient algorithm for calculating the exact Hausdorff
        distance. IEEE Transactions on Pattern Analysis and Machine Intelligence, 37(11), 2153-2163.

    Examples
    --------
    >>> directed_hausdorff([(0, 0), (1, 0)], [(0, 1), (1, 1)])
    1.0
    >>> directed_hausdorff(t0, t1, rng=42)
    """
    t0 = trajectory_to_array(t0, dtype=dtype, name="t0")
    t1 = trajectory_to_array(t1, dtype=dtype, name="t1")
    check_same_dimension(t0, t1)

    rng = np.random.default_rng(rng)
    t0 = t0[rng.permutation(len(t0))]
    t1 = t1[rng.permutation(len(t1))]

    c_max = t0.dtype.type(0)
    n_pruned = 0
    for p in t0:
        c_min = np.inf
        pruned = False
        for q in t1:
            d = point_squared_euclidean_dist(p, q)
            if d < c_max:
                # p has a neighbour closer than c_max, it cannot raise the maximum
                pruned = True
                break
            if d < c_min:
                c_min = d
        if pruned:
            n_pruned += 1
        elif np.isfinite(c_min) and c_min >= c_max:
            c_max = c_min

    logging.debug(
        "Directed Hausdorff distance: %d of %d nearest neighbour searches stopped early." % (n_pruned, len(t0))
    )
    return np.sqrt(c_max)
