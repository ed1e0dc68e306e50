import numpy as np

import trajsim as ts

lengths = [100, 1000]


def _walk(n, seed):
    rng = np.random.default_rng(seed)
    x = np.linspace(0, 100, n)
    y = np.cumsum(rng.normal(scale=0.5, size=n))
    return np.column_stack([x, y])


class TimeSuite_Frechet:
    """Run time tests for frechet_distance() method."""

    params = lengths
    param_names = ["n"]

    def setup(self, n):
        self.t0 = _walk(n, 0)
        self.t1 = _walk(n // 2, 1)

    def time_frechet_distance(self, n):
        ts.frechet_distance(self.t0, self.t1)

    def time_frechet_distance_float32(self, n):
        ts.frechet_distance(self.t0, self.t1, dtype=np.float32)

    def peakmem_frechet_distance(self, n):
        ts.frechet_distance(self.t0, self.t1)


class TimeSuite_Hausdorff:
    """Run time tests for directed_hausdorff() method."""

    params = lengths
    param_names = ["n"]

    def setup(self, n):
        self.t0 = _walk(n, 2)
        self.t1 = _walk(n, 3)

    def time_directed_hausdorff(self, n):
        ts.directed_hausdorff(self.t0, self.t1, rng=0)
