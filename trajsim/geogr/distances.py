import warnings

import geopandas as gpd
import numpy as np
import shapely
from shapely.geometry.base import BaseGeometry


def point_euclidean_dist(a, b):
    """
    Compute the Euclidean distance between points of the same dimension.

    Vectorized over the last axis: ``a`` and ``b`` can be single points or stacks of points
    that broadcast against each other.

    Parameters
    ----------
    a : array_like of shape (d,) or (..., d)
        The first point(s).

    b : array_like of shape (d,) or (..., d)
        The second point(s). Must have the same dimension ``d`` as ``a``.

    Returns
    -------
    float or numpy.array
        The Euclidean distance sqrt(sum((a - b)**2)) along the last axis.

    Examples
    --------
    >>> point_euclidean_dist([0, 0], [3, 4])
    5.0
    >>> point_euclidean_dist(np.zeros((3, 2)), np.ones((3, 2)))
    array([1.41421356, 1.41421356, 1.41421356])
    """
    return np.sqrt(point_squared_euclidean_dist(a, b))


def point_squared_euclidean_dist(a, b):
    """
    Compute the squared Euclidean distance between points of the same dimension.

    Same broadcasting rules as ``point_euclidean_dist``. Useful when distances are only compared with
    each other and the square root can be taken once at the end.

    Examples
    --------
    >>> point_squared_euclidean_dist([0, 0], [3, 4])
    25
    """
    a = np.atleast_1d(np.asarray(a))
    b = np.atleast_1d(np.asarray(b))
    if a.shape[-1] != b.shape[-1]:
        raise ValueError(f"Points must have the same dimension. Got {a.shape[-1]} and {b.shape[-1]}.")
    diff = a - b
    return np.sum(diff * diff, axis=-1)


def check_float_dtype(dtype):
    """Return ``dtype`` as numpy dtype, raise if it is not a floating point type."""
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.floating):
        raise ValueError(f"Only floating point dtypes are supported. You passed {dtype}.")
    return dtype


def trajectory_to_array(trajectory, dtype=np.float64, name="trajectory"):
    """
    Convert a trajectory into a read-only coordinate array of shape (n, d).

    Parameters
    ----------
    trajectory : array_like, shapely geometry, GeoSeries or GeoDataFrame
        The ordered points of the trajectory.

        - array_like of shape (n, d), or (n,) for one dimensional points
        - LineString, LinearRing or MultiPoint, z coordinates are kept if present
        - GeoSeries or GeoDataFrame with one Point per row, taken in row order

    dtype : numpy floating dtype, default np.float64
        Precision used for the coordinates and all distances derived from them.

    name : str, default "trajectory"
        Used in error messages.

    Returns
    -------
    numpy.array
        Non-writeable array of shape (n, d) with n >= 1 and d >= 1.

    Notes
    -----
    Euclidean distances on geographic coordinates are given in degrees. A warning is issued if a
    GeoSeries or GeoDataFrame with a geographic CRS is passed; project it first, e.g. with ``to_crs``.

    Examples
    --------
    >>> trajectory_to_array([(0, 0), (1, 0)])
    >>> trajectory_to_array(LineString([(0, 0), (1, 0), (1, 1)]))
    >>> trajectory_to_array(pfs.to_crs(epsg=2056))
    """
    dtype = check_float_dtype(dtype)

    if isinstance(trajectory, (gpd.GeoSeries, gpd.GeoDataFrame)):
        if trajectory.crs is not None and trajectory.crs.is_geographic:
            warnings.warn(
                f"The CRS of {name} is geographic. Euclidean distances will be computed in degrees, "
                "consider projecting your data first."
            )
        geom = trajectory.geometry
        if not np.all(shapely.get_type_id(geom) == 0):  # 0 is Point
            raise ValueError(f"The geometry of {name} must consist of Points.")
        coords = shapely.get_coordinates(geom, include_z=bool(np.any(shapely.has_z(geom))))
    elif isinstance(trajectory, BaseGeometry):
        # 1 is LineString, 2 is LinearRing, 4 is MultiPoint
        if shapely.get_type_id(trajectory) not in (1, 2, 4):
            raise ValueError(
                f"We only support 'LineString', 'LinearRing' and 'MultiPoint' geometries. "
                f"{name} is a {trajectory.geom_type}."
            )
        coords = shapely.get_coordinates(trajectory, include_z=trajectory.has_z)
    else:
        coords = trajectory

    try:
        coords = np.array(coords, dtype=dtype)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} could not be converted to a coordinate array of dtype {dtype}.") from e

    if coords.ndim == 1:
        coords = coords.reshape(-1, 1)
    if coords.ndim != 2:
        raise ValueError(f"{name} must be of shape (n, d). Got shape {coords.shape}.")
    if coords.shape[0] == 0:
        raise ValueError(f"{name} is empty.")
    if coords.shape[1] == 0:
        raise ValueError(f"The points of {name} have no coordinates.")
    if not np.all(np.isfinite(coords)):
        raise ValueError(f"{name} contains non-finite coordinates.")

    coords.flags.writeable = False
    return coords


def check_same_dimension(t0, t1):
    """
    Check that two coordinate arrays hold points of the same dimension.

    Parameters
    ----------
    t0, t1 : numpy.array of shape (n, d)
        Trajectories as returned by ``trajectory_to_array``.
    """
    if t0.shape[1] != t1.shape[1]:
        raise ValueError(
            f"Trajectories must have the same point dimension. Got {t0.shape[1]} and {t1.shape[1]}."
        )
