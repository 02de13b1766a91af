import random

import pytest

from gameSession import GameSession
from landmarks import LM, Landmark
from poseCatalog import PoseDefinition
from poseMatcher import PoseKind

N_LANDMARKS = 33

# arms hanging down and out to the sides; matches none of the six poses
NEUTRAL = {
    "NOSE": (0.50, 0.20),
    "L_SHO": (0.40, 0.35),
    "R_SHO": (0.60, 0.35),
    "L_ELB": (0.30, 0.55),
    "R_ELB": (0.70, 0.55),
    "L_WRI": (0.20, 0.80),
    "R_WRI": (0.80, 0.80),
    "L_HIP": (0.45, 0.60),
    "R_HIP": (0.55, 0.60),
}


def make_sample(visibility=0.99, **points):
    pts = dict(NEUTRAL)
    pts.update(points)
    out = [Landmark(0.5, 0.5, visibility) for _ in range(N_LANDMARKS)]
    for name, (x, y) in pts.items():
        out[LM[name]] = Landmark(x, y, visibility)
    return tuple(out)


def pose_def(pose_id, name=None):
    return PoseDefinition(pose_id, name or pose_id, f"do the {pose_id}", "*")


CATALOG = tuple(pose_def(k.value) for k in PoseKind)

MATCHING = {
    "t-pose": dict(L_WRI=(0.10, 0.50), L_SHO=(0.40, 0.52), R_WRI=(0.90, 0.49), R_SHO=(0.60, 0.51)),
    "victory-v": dict(L_WRI=(0.25, 0.05), R_WRI=(0.75, 0.05)),
    "hands-on-hips": dict(L_WRI=(0.42, 0.60), R_WRI=(0.58, 0.60)),
    "hands-on-head": dict(L_WRI=(0.45, 0.12), R_WRI=(0.55, 0.12)),
    "right-arm-up": dict(R_WRI=(0.65, 0.00)),
    "arms-crossed": dict(L_WRI=(0.62, 0.45), R_WRI=(0.38, 0.45)),
}


class StubJudge:
    """Scripted judge: returns queued results in order and counts calls."""
    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def __call__(self, sample, target):
        self.calls.append((sample, target))
        return self.results.pop(0)


@pytest.fixture
def catalog():
    return CATALOG


@pytest.fixture
def neutral():
    return make_sample()


@pytest.fixture
def session(catalog):
    return GameSession(catalog, rng=random.Random(7))
