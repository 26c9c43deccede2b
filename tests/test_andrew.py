import math

from cg2d.andrew import AndrewMonotoneChain
from cg2d.geom import Pt
from cg2d.predicates import Orientation, orient
from cg2d.progress import StepKind

from shapes import P, DIAMOND, DIAMOND_HULL


def test_diamond_step_sequence():
    steps = list(AndrewMonotoneChain().steps(DIAMOND))
    kinds = [s.kind for s in steps]
    PUSH, POP = StepKind.PUSH, StepKind.POP
    lower_phase = [PUSH, PUSH, PUSH, POP, PUSH, POP, PUSH]
    upper_phase = [PUSH, PUSH, PUSH, POP, PUSH, POP, PUSH]
    assert kinds == lower_phase + upper_phase + [StepKind.FINISHED]
    assert list(steps[-1].hull) == DIAMOND_HULL

def test_lower_phase_snapshots():
    steps = list(AndrewMonotoneChain().steps(DIAMOND))
    # (1,0) знято, бо (1,-1),(1,0),(1,1) колінеарні
    assert steps[3].kind is StepKind.POP
    assert steps[3].point == Pt(1, 0)
    assert steps[3].lower == tuple(P((0, 0), (1, -1)))
    assert steps[3].upper == ()
    # кінець нижнього ланцюга
    assert steps[6].lower == tuple(P((0, 0), (1, -1), (2, 0)))

def test_upper_phase_carries_finished_lower():
    steps = list(AndrewMonotoneChain().steps(DIAMOND))
    lower = tuple(P((0, 0), (1, -1), (2, 0)))
    for s in steps[7:-1]:
        assert s.lower == lower
    assert steps[-2].upper == tuple(P((2, 0), (1, 1), (0, 0)))

def test_snapshots_are_independent_copies():
    steps = list(AndrewMonotoneChain().steps(DIAMOND))
    sizes = [len(s.lower) for s in steps[:7]]
    assert sizes == [1, 2, 3, 2, 3, 2, 3]
    assert all(isinstance(s.lower, tuple) for s in steps)

def test_chain_invariant_holds_after_every_push():
    pts = P((0, 0), (1, 2), (2, 1), (3, 3), (4, 0), (2, -2), (1, -1), (3, -1))
    for s in AndrewMonotoneChain().steps(pts):
        if s.kind is not StepKind.PUSH:
            continue
        chain = s.upper or s.lower
        for a, b, c in zip(chain, chain[1:], chain[2:]):
            assert orient(a, b, c) is Orientation.LEFT

def test_pop_fires_on_collinear():
    steps = list(AndrewMonotoneChain().steps(P((0, 0), (1, 0), (2, 0), (3, 0))))
    pops = [s.point for s in steps if s.kind is StepKind.POP]
    assert Pt(1, 0) in pops and Pt(2, 0) in pops
    assert list(steps[-1].hull) == P((0, 0), (3, 0))

def test_sort_uses_y_as_secondary_key():
    hull = AndrewMonotoneChain().compute_convex_hull(P((1, 2), (1, 0), (0, 1), (2, 1)))
    assert hull == P((0, 1), (1, 0), (2, 1), (1, 2))

def test_custom_eps_treats_shallow_turn_as_collinear():
    pts = P((0, 0), (1, -1e-9), (2, 0), (1, 1))
    assert AndrewMonotoneChain().compute_convex_hull(pts) == P((0, 0), (1, -1e-9), (2, 0), (1, 1))
    assert AndrewMonotoneChain(eps=1e-6).compute_convex_hull(pts) == P((0, 0), (2, 0), (1, 1))


def circle(n):
    return [Pt(math.cos(2 * math.pi * k / n), math.sin(2 * math.pi * k / n)) for k in range(n)]

def test_batch_builds_no_snapshots(monkeypatch):
    import cg2d.andrew as andrew

    made = []
    real_step = andrew.Step

    def counting_step(*args, **kwargs):
        made.append(args[0])
        return real_step(*args, **kwargs)

    monkeypatch.setattr(andrew, "Step", counting_step)
    pts = circle(200)
    hull = AndrewMonotoneChain().compute_convex_hull(pts)
    assert made == []
    assert len(hull) == 200

    steps = list(AndrewMonotoneChain().steps(pts))
    assert len(made) == len(steps) - 1
    assert list(steps[-1].hull) == hull

def test_batch_and_stream_agree_on_convex_position():
    pts = circle(300)
    algo = AndrewMonotoneChain()
    assert list(list(algo.steps(pts))[-1].hull) == algo.compute_convex_hull(pts)
