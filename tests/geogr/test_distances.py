import geopandas as gpd
import numpy as np
import pytest
from shapely.geometry import LinearRing, LineString, MultiLineString, MultiPoint, Point, Polygon

from trajsim.geogr.distances import (
    check_float_dtype,
    check_same_dimension,
    point_euclidean_dist,
    point_squared_euclidean_dist,
    trajectory_to_array,
)


@pytest.fixture
def gdf_points():
    """Construct a projected gdf with three Points."""
    return gpd.GeoDataFrame(
        {"id": [0, 1, 2]}, geometry=[Point(0, 0), Point(1, 0), Point(1, 1)], crs="EPSG:2056"
    )


class TestPointEuclideanDist:
    def test_pythagoras(self):
        assert point_euclidean_dist([0, 0], [3, 4]) == 5

    def test_unit_offset(self):
        """Points with matching index of two parallel lines are one unit apart."""
        a = np.array([[0, 0], [1, 0]])
        b = np.array([[0, 1], [1, 1]])
        assert np.all(point_euclidean_dist(a, b) == 1)

    def test_vectorized(self):
        a = np.zeros((4, 3))
        b = np.ones((4, 3))
        d = point_euclidean_dist(a, b)
        assert d.shape == (4,)
        assert np.allclose(d, np.sqrt(3))

    def test_symmetry(self):
        rng = np.random.default_rng(0)
        a, b = rng.normal(size=(2, 10, 2))
        assert np.all(point_euclidean_dist(a, b) == point_euclidean_dist(b, a))

    def test_identity(self):
        a = np.array([[1.5, -2.0], [3.0, 4.0]])
        assert np.all(point_euclidean_dist(a, a) == 0)

    def test_one_dimensional(self):
        assert point_euclidean_dist(2.0, -1.0) == 3

    def test_dimension_mismatch(self):
        """A 2-D point cannot be compared against a 3-D point."""
        with pytest.raises(ValueError, match="same dimension"):
            point_euclidean_dist([0, 0], [0, 0, 0])

    def test_squared(self):
        """The squared distance skips the square root and keeps the dtype."""
        a = np.array([0, 0], dtype=np.float32)
        b = np.array([3, 4], dtype=np.float32)
        d = point_squared_euclidean_dist(a, b)
        assert d == 25
        assert d.dtype == np.float32
        assert point_euclidean_dist(a, b) ** 2 == d

    def test_squared_dimension_mismatch(self):
        with pytest.raises(ValueError, match="same dimension"):
            point_squared_euclidean_dist([0, 0], [0, 0, 0])


class TestTrajectoryToArray:
    def test_list(self):
        arr = trajectory_to_array([(0, 0), (1, 0), (2, 0)])
        assert arr.shape == (3, 2)
        assert arr.dtype == np.float64

    def test_read_only(self):
        arr = trajectory_to_array([(0, 0), (1, 0)])
        with pytest.raises(ValueError):
            arr[0, 0] = 1

    def test_input_not_modified(self):
        coords = np.array([[0.0, 0.0], [1.0, 0.0]])
        trajectory_to_array(coords)
        coords[0, 0] = 5.0
        assert coords.flags.writeable

    def test_one_dimensional_points(self):
        arr = trajectory_to_array([0, 1, 2, 3])
        assert arr.shape == (4, 1)

    def test_dtype(self):
        arr = trajectory_to_array([(0, 0), (1, 0)], dtype=np.float32)
        assert arr.dtype == np.float32

    def test_non_float_dtype(self):
        with pytest.raises(ValueError, match="floating point"):
            trajectory_to_array([(0, 0), (1, 0)], dtype=np.int64)

    def test_linestring(self):
        arr = trajectory_to_array(LineString([(0, 0), (1, 0), (1, 1)]))
        assert np.array_equal(arr, [[0, 0], [1, 0], [1, 1]])

    def test_linestring_z(self):
        arr = trajectory_to_array(LineString([(0, 0, 1), (1, 0, 2)]))
        assert arr.shape == (2, 3)
        assert np.array_equal(arr[:, 2], [1, 2])

    def test_multipoint(self):
        arr = trajectory_to_array(MultiPoint([(0, 0), (2, 2)]))
        assert np.array_equal(arr, [[0, 0], [2, 2]])

    def test_linearring(self):
        arr = trajectory_to_array(LinearRing([(0, 0), (1, 0), (1, 1)]))
        assert np.array_equal(arr, [[0, 0], [1, 0], [1, 1], [0, 0]])

    def test_multilinestring_rejected(self):
        """The parts of a MultiLineString must not be glued into one trajectory."""
        geom = MultiLineString([[(0, 0), (1, 0)], [(10, 10), (11, 10)]])
        with pytest.raises(ValueError, match="is a MultiLineString"):
            trajectory_to_array(geom)

    def test_polygon_rejected(self):
        with pytest.raises(ValueError, match="is a Polygon"):
            trajectory_to_array(Polygon([(0, 0), (1, 0), (1, 1)]))

    def test_point_rejected(self):
        with pytest.raises(ValueError, match="is a Point"):
            trajectory_to_array(Point(0, 0))

    def test_geodataframe(self, gdf_points):
        arr = trajectory_to_array(gdf_points)
        assert np.array_equal(arr, [[0, 0], [1, 0], [1, 1]])

    def test_geoseries(self, gdf_points):
        arr = trajectory_to_array(gdf_points.geometry)
        assert arr.shape == (3, 2)

    def test_geographic_crs_warning(self):
        """Euclidean distances on degrees should raise a warning."""
        gdf = gpd.GeoDataFrame(geometry=[Point(8.5, 47.3), Point(8.7, 47.2)], crs="EPSG:4326")
        with pytest.warns(UserWarning, match="geographic"):
            arr = trajectory_to_array(gdf)
        assert arr.shape == (2, 2)

    def test_geodataframe_not_points(self):
        gdf = gpd.GeoDataFrame(geometry=[LineString([(0, 0), (1, 1)])], crs="EPSG:2056")
        with pytest.raises(ValueError, match="Points"):
            trajectory_to_array(gdf)

    def test_empty(self):
        with pytest.raises(ValueError, match="empty"):
            trajectory_to_array([])
        with pytest.raises(ValueError, match="empty"):
            trajectory_to_array(LineString())

    def test_ragged(self):
        with pytest.raises(ValueError):
            trajectory_to_array([(0, 0), (1,)])

    def test_non_finite(self):
        with pytest.raises(ValueError, match="non-finite"):
            trajectory_to_array([(0, 0), (np.nan, 1)])

    def test_too_many_dimensions(self):
        with pytest.raises(ValueError, match="shape"):
            trajectory_to_array(np.zeros((2, 2, 2)))

    def test_name_in_message(self):
        with pytest.raises(ValueError, match="t1 is empty"):
            trajectory_to_array([], name="t1")


class TestChecks:
    def test_same_dimension(self):
        check_same_dimension(np.zeros((3, 2)), np.zeros((5, 2)))

    def test_different_dimension(self):
        with pytest.raises(ValueError, match="same point dimension"):
            check_same_dimension(np.zeros((3, 2)), np.zeros((3, 3)))

    def test_float_dtype(self):
        assert check_float_dtype("float32") == np.float32
        with pytest.raises(ValueError):
            check_float_dtype(int)
