from trajsim.__version__ import __version__


def print_version():
    """Print the framework version."""

    print(
        "This is trajsim v"
        + str(__version__)
        + ". It computes banded Frechet and directed Hausdorff distances between trajectories."
    )
