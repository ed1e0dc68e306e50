"""
Banded distance matrix after Devogele, T., Esnault, M., Etienne, L., & Lardy, F. (2017).
Optimized Discrete Frechet Distance between trajectories.

"""


import logging

import numpy as np

from trajsim.geogr.distances import check_same_dimension, point_euclidean_dist, trajectory_to_array


def core_diagonal(n, m):
    """
    Map every index of the longer trajectory onto an index of the shorter one.

    The m indices of the shorter trajectory are spread evenly over the n indices of the longer one,
    which approximates a uniform time warp between the two.

    Parameters
    ----------
    n : int
        Length of the longer trajectory.

    m : int
        Length of the shorter trajectory, 1 <= m <= n.

    Returns
    -------
    numpy.array of shape (n,)
        The companion index j for every i. Starts at 0, ends at m - 1 and grows by at most 1 per step.

    Examples
    --------
    >>> core_diagonal(5, 2)
    array([0, 0, 0, 1, 1])
    """
    if m < 1 or n < m:
        raise ValueError(f"core_diagonal requires n >= m >= 1. Got n={n} and m={m}.")
    q, r = divmod(n, m)
    i = np.arange(n)
    # the first r indices of the short trajectory get q + 1 partners, the others q
    return np.where(i <= r * (q + 1), i // (q + 1), (i - r) // q)


def calculate_banded_distance_matrix(t0, t1, dtype=np.float64):
    """
    Compute the pairwise distance matrix of two trajectories restricted to a band around the diagonal.

    Exact Euclidean distances are first computed on the core diagonal (see ``core_diagonal``). Its largest
    value, ``diag_max``, bounds the discrete Frechet distance from above. Starting from the core diagonal,
    every row is then extended to the right and every column downwards as long as the distances stay
    strictly below ``diag_max``. All other cells are left unset.

    Parameters
    ----------
    t0 : array_like, shapely geometry, GeoSeries or GeoDataFrame
        The first trajectory with n0 points. See ``trajectory_to_array`` for the accepted inputs.

    t1 : array_like, shapely geometry, GeoSeries or GeoDataFrame
        The second trajectory with n1 points of the same dimension as t0.

    dtype : numpy floating dtype, default np.float64
        Precision of the coordinates and the distance matrix.

    Returns
    -------
    D : numpy.array of shape (n, m)
        The banded distance matrix with n = max(n0, n1) and m = min(n0, n1). Unset cells are NaN, so a
        distance of 0 between coincident points is never mistaken for a missing value.

    diag_max : numpy floating scalar
        The maximal distance on the core diagonal.

    swapped : bool
        True if t1 is longer than t0. Then the rows of D belong to t1 and the columns to t0.

    Notes
    -----
    The band is a heuristic. It contains the optimal coupling of trajectories that are sampled at a similar
    pace, but may miss it for very uneven sampling. The number of computed cells is proportional to the band
    area and not to n * m.

    Examples
    --------
    >>> D, diag_max, swapped = calculate_banded_distance_matrix([(0, 0), (1, 0)], [(0, 1), (1, 1)])
    >>> float(diag_max)
    1.0
    """
    t0 = trajectory_to_array(t0, dtype=dtype, name="t0")
    t1 = trajectory_to_array(t1, dtype=dtype, name="t1")
    check_same_dimension(t0, t1)

    swapped = len(t0) < len(t1)
    if swapped:
        t0, t1 = t1, t0
    n, m = len(t0), len(t1)

    D = np.full((n, m), np.nan, dtype=t0.dtype)

    diag = core_diagonal(n, m)
    rows = np.arange(n)
    D[rows, diag] = point_euclidean_dist(t0, t1[diag])
    diag_max = D[rows, diag].max()

    # upper right: extend every row to the right of its core cell
    for i in range(n):
        for j in range(diag[i] + 1, m):
            d = point_euclidean_dist(t0[i], t1[j])
            if d >= diag_max:
                break
            D[i, j] = d

    # lower left: extend every column below its last core cell
    col_ends = np.searchsorted(diag, np.arange(m), side="right")
    for j in range(m):
        for i in range(col_ends[j], n):
            d = point_euclidean_dist(t0[i], t1[j])
            if d >= diag_max:
                break
            D[i, j] = d

    logging.debug(
        "Banded distance matrix of shape %s: %d of %d cells computed, diag_max=%s."
        % (D.shape, np.count_nonzero(~np.isnan(D)), D.size, diag_max)
    )
    return D, diag_max, swapped
