from collections import namedtuple
from enum import Enum

import numpy as np

from landmarks import LM, is_complete

MatchResult = namedtuple("MatchResult", ["matched", "score", "feedback"])

NO_BODY_FEEDBACK = "No body detected. Stand back!"
DEFAULT_FEEDBACK = "Try harder!"

# tolerance for the inclusive "at least N above" margins
EPS = 1e-9


class PoseKind(Enum):
    T_POSE = "t-pose"
    VICTORY_V = "victory-v"
    HANDS_ON_HIPS = "hands-on-hips"
    HANDS_ON_HEAD = "hands-on-head"
    RIGHT_ARM_UP = "right-arm-up"
    ARMS_CROSSED = "arms-crossed"


# ============================================================
# GEOMETRY
# ============================================================
def _dist(a, b) -> float:
    return float(np.linalg.norm(np.array([a.x, a.y]) - np.array([b.x, b.y])))

def _above(wrist, shoulder, margin) -> bool:
    # y grows downward: "above" means smaller y
    return shoulder.y - wrist.y >= margin - EPS


# ============================================================
# RULES (one predicate per PoseKind)
# ============================================================
def _t_pose(lm):
    l_horiz = abs(lm[LM["L_WRI"]].y - lm[LM["L_SHO"]].y) < 0.15
    r_horiz = abs(lm[LM["R_WRI"]].y - lm[LM["R_SHO"]].y) < 0.15
    spread = abs(lm[LM["L_WRI"]].x - lm[LM["R_WRI"]].x) > 0.4
    return l_horiz and r_horiz and spread

def _victory_v(lm):
    l_up = _above(lm[LM["L_WRI"]], lm[LM["L_SHO"]], 0.2)
    r_up = _above(lm[LM["R_WRI"]], lm[LM["R_SHO"]], 0.2)
    spread = abs(lm[LM["L_WRI"]].x - lm[LM["R_WRI"]].x) > 0.3
    return l_up and r_up and spread

def _hands_on_hips(lm):
    return (_dist(lm[LM["L_WRI"]], lm[LM["L_HIP"]]) < 0.2
            and _dist(lm[LM["R_WRI"]], lm[LM["R_HIP"]]) < 0.2)

def _hands_on_head(lm):
    nose = lm[LM["NOSE"]]
    return (_dist(lm[LM["L_WRI"]], nose) < 0.25
            and _dist(lm[LM["R_WRI"]], nose) < 0.25
            and lm[LM["L_WRI"]].y < lm[LM["L_SHO"]].y)

def _right_arm_up(lm):
    r_high = _above(lm[LM["R_WRI"]], lm[LM["R_SHO"]], 0.3)
    l_low = lm[LM["L_WRI"]].y >= lm[LM["L_SHO"]].y
    return r_high and l_low

def _arms_crossed(lm):
    # literal comparison; the camera feed may be mirrored upstream
    crossed = lm[LM["L_WRI"]].x > lm[LM["R_WRI"]].x
    return crossed and abs(lm[LM["L_WRI"]].y - lm[LM["L_SHO"]].y) < 0.3


# kind -> (predicate, score when matched, feedback matched, feedback not matched)
RULES = {
    PoseKind.T_POSE: (_t_pose, 95, "Perfect T-Shape!", "Extend your arms fully to the sides."),
    PoseKind.VICTORY_V: (_victory_v, 90, "Victory attained!", "Raise your hands high in a V!"),
    PoseKind.HANDS_ON_HIPS: (_hands_on_hips, 85, "Looking heroic!", "Put your hands on your hips."),
    PoseKind.HANDS_ON_HEAD: (_hands_on_head, 88, "Mind status: Blown!", "Hands on your head!"),
    PoseKind.RIGHT_ARM_UP: (_right_arm_up, 92, "Reaching the stars!", "Raise only your right hand."),
    PoseKind.ARMS_CROSSED: (_arms_crossed, 80, "Power pose active!", "Cross your arms over your chest."),
}

_KIND_BY_ID = {k.value: k for k in PoseKind}


def kind_for(pose_id):
    return _KIND_BY_ID.get(pose_id)


def evaluate(sample, target):
    """
    Judge one landmark sample against a target PoseDefinition.

    Pure: no state, no I/O. Never raises for a missing body or an unknown
    pose id; both come back as a plain non-match with score 0.
    """
    if not is_complete(sample):
        return MatchResult(False, 0, NO_BODY_FEEDBACK)

    kind = kind_for(target.id)
    if kind is None:
        return MatchResult(False, 0, DEFAULT_FEEDBACK)

    predicate, score, ok_msg, fail_msg = RULES[kind]
    if predicate(sample):
        return MatchResult(True, score, ok_msg)
    return MatchResult(False, 0, fail_msg)
