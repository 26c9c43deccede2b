import pytest

from cg2d.andrew import AndrewMonotoneChain
from cg2d.geom import Pt
from cg2d.io import uniform_random
from cg2d.jarvis import JarvisGiftWrapping
from cg2d.pipeline import ALGORITHMS, convex_hull, get_algorithm, hull_steps, reference_hull
from cg2d.progress import StepKind

from shapes import (
    P, DIAMOND, DIAMOND_HULL, SQUARE_WITH_MIDPOINTS, SQUARE_HULL,
    TINY_TRIANGLE, NOISY_SEGMENT, NOISY_TRIANGLE,
)


def grid(n):
    return P(*[(x, y) for x in range(n) for y in range(n)])


def test_registry():
    assert set(ALGORITHMS) == {"andrew", "jarvis"}
    assert isinstance(get_algorithm("andrew"), AndrewMonotoneChain)
    assert isinstance(get_algorithm("JARVIS"), JarvisGiftWrapping)
    assert get_algorithm("andrew", eps=1e-6).eps == 1e-6

def test_unknown_algorithm():
    with pytest.raises(ValueError):
        get_algorithm("graham")

@pytest.mark.parametrize("name", ["andrew", "jarvis"])
def test_convex_hull_and_steps(name):
    assert convex_hull(DIAMOND, algorithm=name) == DIAMOND_HULL
    steps = list(hull_steps(DIAMOND, algorithm=name))
    assert steps[-1].kind is StepKind.FINISHED
    assert list(steps[-1].hull) == DIAMOND_HULL

@pytest.mark.parametrize(
    "pts",
    [
        DIAMOND,
        SQUARE_WITH_MIDPOINTS,
        grid(6),
        # колінеарні точки на всіх сторонах трикутника
        P((0, 0), (4, 0), (2, 4), (1, 0), (2, 0), (3, 0), (1, 2), (3, 2), (2, 1)),
        P((0, 0), (1, 0), (2, 0), (3, 0)),
        TINY_TRIANGLE,
        NOISY_SEGMENT,
        NOISY_TRIANGLE,
    ],
)
def test_agreement_on_collinear_heavy_sets(pts):
    assert convex_hull(pts, "andrew") == convex_hull(pts, "jarvis")

def test_agreement_on_random_sets(random_points):
    assert convex_hull(random_points, "andrew") == convex_hull(random_points, "jarvis")

def test_grid_hull_is_its_corners():
    assert convex_hull(grid(5)) == P((0, 0), (4, 0), (4, 4), (0, 4))

def test_agreement_on_circle_points():
    import math
    pts = [Pt(math.cos(2 * math.pi * k / 64), math.sin(2 * math.pi * k / 64)) for k in range(64)]
    andrew = convex_hull(pts, "andrew")
    assert andrew == convex_hull(pts, "jarvis")
    assert len(andrew) == 64
    assert set(andrew) == set(pts)


class TestReferenceHull:
    @pytest.fixture(autouse=True)
    def _need_scipy(self):
        pytest.importorskip("scipy")

    def test_diamond(self):
        assert reference_hull(DIAMOND) == DIAMOND_HULL

    def test_square_with_midpoints(self):
        assert reference_hull(SQUARE_WITH_MIDPOINTS) == SQUARE_HULL

    def test_degenerate_inputs(self):
        assert reference_hull([]) == []
        assert reference_hull([(1, 1), (2, 2)]) == P((1, 1), (2, 2))
        assert reference_hull(P((0, 0), (1, 0), (2, 0), (3, 0))) == P((0, 0), (3, 0))

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_matches_both_algorithms(self, seed):
        pts = uniform_random(300, seed=seed)
        ref = reference_hull(pts)
        assert convex_hull(pts, "andrew") == ref
        assert convex_hull(pts, "jarvis") == ref
