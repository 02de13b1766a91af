from collections import namedtuple

# --------------------
# LANDMARK INDICES (MediaPipe Pose)
# --------------------
LM = {
    "NOSE": 0,
    "L_SHO": 11,
    "R_SHO": 12,
    "L_ELB": 13,
    "R_ELB": 14,
    "L_WRI": 15,
    "R_WRI": 16,
    "L_HIP": 23,
    "R_HIP": 24,
}

REQUIRED = (
    LM["NOSE"],
    LM["L_SHO"], LM["R_SHO"],
    LM["L_WRI"], LM["R_WRI"],
    LM["L_HIP"], LM["R_HIP"],
)

# --------------------
# VISIBILITY GATE
# --------------------
VIS_CORE  = 0.50
VIS_WRIST = 0.1
VIS_FACE  = 0.18

Landmark = namedtuple("Landmark", ["x", "y", "visibility"])


def thr_for_idx(idx: int) -> float:
    if idx in (LM["L_SHO"], LM["R_SHO"], LM["L_HIP"], LM["R_HIP"]):
        return VIS_CORE
    if idx in (LM["L_WRI"], LM["R_WRI"]):
        return VIS_WRIST
    if idx == LM["NOSE"]:
        return VIS_FACE
    return 0.30


def is_complete(sample) -> bool:
    return bool(sample) and len(sample) > max(REQUIRED)


def visibility_ok(sample) -> bool:
    for idx in REQUIRED:
        if sample[idx].visibility < thr_for_idx(idx):
            return False
    return True


def to_sample(landmarks, vis_gate=False):
    """
    Freeze a landmark list (MediaPipe NormalizedLandmark objects, Landmark
    tuples, or anything with .x/.y) into an immutable tuple of Landmark.

    Returns None when no body is present: empty input, a list too short to
    hold every required index, or (vis_gate) a required point that the
    tracker is not confident about.
    """
    if not landmarks:
        return None

    sample = tuple(
        Landmark(float(p.x), float(p.y), float(getattr(p, "visibility", 1.0)))
        for p in landmarks
    )
    if not is_complete(sample):
        return None
    if vis_gate and not visibility_ok(sample):
        return None
    return sample
