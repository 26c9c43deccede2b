import pytest

from cg2d.andrew import AndrewMonotoneChain
from cg2d.io import uniform_random
from cg2d.jarvis import JarvisGiftWrapping


@pytest.fixture(params=[AndrewMonotoneChain, JarvisGiftWrapping], ids=["andrew", "jarvis"])
def algorithm(request):
    return request.param()


@pytest.fixture(params=[(30, 1), (200, 7), (500, 1234)], ids=lambda p: f"n{p[0]}-seed{p[1]}")
def random_points(request):
    n, seed = request.param
    return uniform_random(n, seed=seed)
