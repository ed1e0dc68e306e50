import numpy as np

from trajsim.similarity.distance_matrix import calculate_banded_distance_matrix


class BandCoverageError(RuntimeError):
    """The banded distance matrix does not connect the first and the last point pair."""


def calculate_frechet_matrix(t0, t1, dtype=np.float64):
    """
    Compute the Frechet coupling matrix of two trajectories on the banded distance matrix.

    Cell (i, j) holds the smallest possible maximal step distance of a monotone coupling from (0, 0) to
    (i, j) that only passes through cells of the band. See ``calculate_banded_distance_matrix`` for
    how the band is built.

    Parameters
    ----------
    t0 : array_like, shapely geometry, GeoSeries or GeoDataFrame
        The first trajectory.

    t1 : array_like, shapely geometry, GeoSeries or GeoDataFrame
        The second trajectory, with points of the same dimension as t0.

    dtype : numpy floating dtype, default np.float64
        Precision of the coordinates and the matrices.

    Returns
    -------
    C : numpy.array of shape (n, m)
        Coupling matrix with the longer trajectory on the rows (n >= m). Cells outside of the band are
        NaN, cells inside the band that cannot be reached from (0, 0) are inf.

    Examples
    --------
    >>> C = calculate_frechet_matrix(exp_data, num_data)
    >>> frechet_dist = C[-1, -1]
    """
    D, _, _ = calculate_banded_distance_matrix(t0, t1, dtype=dtype)
    return _propagate_coupling(D)


def _propagate_coupling(D):
    n, m = D.shape
    in_band = ~np.isnan(D)
    C = np.where(in_band, np.inf, np.nan).astype(D.dtype)
    C[0, 0] = D[0, 0]

    for i in range(n):
        row = in_band[i]
        band_cols = np.flatnonzero(row)
        if band_cols.size == 0:
            continue
        # cursor runs from the first to the last cell of the band in this row
        for j in range(band_cols[0], band_cols[-1] + 1):
            if not row[j] or (i == 0 and j == 0):
                continue
            minimum = np.inf
            if i > 0 and j > 0 and in_band[i - 1, j - 1]:
                minimum = C[i - 1, j - 1]
            if i > 0 and in_band[i - 1, j]:
                minimum = min(minimum, C[i - 1, j])
            if j > 0 and in_band[i, j - 1]:
                minimum = min(minimum, C[i, j - 1])
            C[i, j] = max(minimum, D[i, j])
    return C


def frechet_distance(t0, t1, dtype=np.float64):
    """
    Compute the banded discrete Frechet distance between two trajectories.

    The discrete Frechet distance is the smallest leash length that allows to walk both trajectories
    point by point, in order and without going back, while never being further apart than the leash.
    Only couplings within the band around the diagonal are considered, which makes the computation
    proportional to the band area instead of n * m [1]_.

    Parameters
    ----------
    t0 : array_like, shapely geometry, GeoSeries or GeoDataFrame
        The first trajectory with n0 >= 1 points, e.g. of shape (n0, d).

    t1 : array_like, shapely geometry, GeoSeries or GeoDataFrame
        The second trajectory with n1 >= 1 points of the same dimension d.

    dtype : numpy floating dtype, default np.float64
        Precision of the computation, e.g. np.float32 to trade precision for memory.

    Returns
    -------
    numpy floating scalar
        The banded discrete Frechet distance. Symmetric in t0 and t1.

    Raises
    ------
    ValueError
        If a trajectory is empty or the point dimensions differ.

    BandCoverageError
        If the band does not connect the first and the last pair of points.

    Notes
    -----
    The result is never smaller than the exact discrete Frechet distance and never larger than the
    maximal distance on the core diagonal. It equals the exact value if the optimal coupling lies inside
    the band, which holds for trajectories that are sampled at a similar pace. For very uneven sampling
    the distance may be overestimated.

    References
    ----------
    .. [1] Devogele, T., Esnault, M., Etienne, L., & Lardy, F. (2017). Optimized Discrete Frechet Distance
        between trajectories. Proceedings of the 6th ACM SIGSPATIAL Workshop on Analytics for Big
        Geospatial Data.

    Examples
    --------
    >>> frechet_distance([(0, 0), (1, 0)], [(0, 1), (1, 1)])
    1.0
    >>> frechet_distance(triplegs.geometry.iloc[0], triplegs.geometry.iloc[1])
    """
    C = calculate_frechet_matrix(t0, t1, dtype=dtype)
    dist = C[-1, -1]
    if not np.isfinite(dist):
        raise BandCoverageError(
            f"The band of the distance matrix does not reach cell {(C.shape[0] - 1, C.shape[1] - 1)}."
        )
    return dist


def frechet_path(C):
    """
    Calculate the optimal Frechet coupling from a given coupling matrix.

    Starting at the last cell, the path steps back to the predecessor with the smallest coupling value
    until (0, 0) is reached. The diagonal step is preferred on ties.

    Parameters
    ----------
    C : ndarray (2-D)
        Coupling matrix as returned by ``calculate_frechet_matrix``.

    Returns
    -------
    path : ndarray of shape (k, 2)
        The coupled index pairs, starting with (0, 0) and ending with (n - 1, m - 1).

    Notes
    -----
    path[:, 0] indexes the rows of C, i.e. the longer trajectory, and path[:, 1] the shorter one.

    Examples
    --------
    >>> C = calculate_frechet_matrix(exp_data, num_data)
    >>> path = frechet_path(C)
    """
    C = np.asarray(C)
    i, j = C.shape[0] - 1, C.shape[1] - 1
    if not np.isfinite(C[i, j]):
        raise BandCoverageError(f"Cell {(i, j)} is not reachable in the coupling matrix.")

    path = [(i, j)]
    while i > 0 or j > 0:
        steps = []
        if i > 0 and j > 0:
            steps.append((C[i - 1, j - 1], i - 1, j - 1))
        if i > 0:
            steps.append((C[i - 1, j], i - 1, j))
        if j > 0:
            steps.append((C[i, j - 1], i, j - 1))
        # NaN and inf mark cells outside the band or unreachable ones
        steps = [s for s in steps if np.isfinite(s[0])]
        _, i, j = min(steps, key=lambda s: s[0])
        path.append((i, j))
    # reverse the order of path, such that it starts with [0, 0]
    return np.array(path[::-1])
