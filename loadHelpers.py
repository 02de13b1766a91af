import json
from pathlib import Path

POSE_KEYS = ("id", "name", "description", "icon")

DEFAULT_SETTINGS = {
    "round_ms": 8000,
    "tick_ms": 100,
    "warning_ms": 1500,
    "start_lives": 3,
    "judge_delay_ms": 800,
    "camera_index": 0,
    "mirror": True,
    "vis_gate": False,
    "game_over_url": None,
    "seed": None,
}

_POSITIVE_INTS = ("round_ms", "tick_ms", "start_lives")
_NON_NEGATIVE_INTS = ("warning_ms", "judge_delay_ms", "camera_index")


def load_json(p: Path):
    with open(p, "r", encoding="utf-8") as f:
        return json.load(f)

def sanitize_pose_def(data, source=""):
    """Return a clean pose dict, or None (with a warning) if a key is missing."""
    if not isinstance(data, dict):
        print(f"[WARN] Pose file {source} is not a JSON object, skipping")
        return None

    clean = {}
    for k in POSE_KEYS:
        v = data.get(k)
        if not isinstance(v, str) or not v.strip():
            print(f"[WARN] Pose file {source} missing '{k}', skipping")
            return None
        clean[k] = v.strip()
    return clean

def load_settings(p=None):
    settings = dict(DEFAULT_SETTINGS)
    if p is None:
        return settings

    data = load_json(Path(p))
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {p} must hold a JSON object")

    for k, v in data.items():
        if k not in DEFAULT_SETTINGS:
            print(f"[WARN] Unknown setting '{k}' ignored")
            continue
        settings[k] = v

    for k in _POSITIVE_INTS + _NON_NEGATIVE_INTS:
        v = settings[k]
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"Setting '{k}' must be an integer, got {v!r}")
        if k in _POSITIVE_INTS and v <= 0:
            raise ValueError(f"Setting '{k}' must be positive, got {v}")
        if v < 0:
            raise ValueError(f"Setting '{k}' must not be negative, got {v}")

    return settings
