from types import SimpleNamespace

from conftest import make_sample
from landmarks import LM, REQUIRED, Landmark, thr_for_idx, to_sample


def test_absent_inputs():
    assert to_sample(None) is None
    assert to_sample([]) is None
    assert to_sample(make_sample()[:LM["R_HIP"]]) is None


def test_freezes_mediapipe_like_objects():
    raw = [SimpleNamespace(x=0.1 * (i % 10), y=0.5, visibility=0.9) for i in range(33)]
    sample = to_sample(raw)
    assert isinstance(sample, tuple) and len(sample) == 33
    assert sample[LM["L_WRI"]] == Landmark(0.5, 0.5, 0.9)

    raw[LM["L_WRI"]].x = 0.99
    assert sample[LM["L_WRI"]].x == 0.5


def test_missing_visibility_counts_as_visible():
    raw = [SimpleNamespace(x=0.5, y=0.5) for _ in range(33)]
    assert all(p.visibility == 1.0 for p in to_sample(raw))


def test_visibility_gate():
    assert to_sample(make_sample(visibility=0.05)) is not None
    assert to_sample(make_sample(visibility=0.05), vis_gate=True) is None
    assert to_sample(make_sample(visibility=0.9), vis_gate=True) is not None


def test_thresholds():
    assert thr_for_idx(LM["L_SHO"]) == 0.5
    assert thr_for_idx(LM["R_WRI"]) == 0.1
    assert thr_for_idx(LM["NOSE"]) == 0.18
    assert LM["L_ELB"] not in REQUIRED
