import random
from collections import namedtuple
from pathlib import Path

from loadHelpers import load_json, sanitize_pose_def

POSE_DIR = Path(__file__).resolve().parent / "poses"

PoseDefinition = namedtuple("PoseDefinition", ["id", "name", "description", "icon"])


def load_catalog(pose_dir=POSE_DIR):
    """Read every poses/*.json into an immutable tuple, in filename order."""
    pose_dir = Path(pose_dir)
    catalog = []
    seen = set()

    if pose_dir.exists():
        for f in sorted(pose_dir.iterdir()):
            if f.suffix != ".json":
                continue
            data = sanitize_pose_def(load_json(f), source=f.name)
            if data is None:
                continue
            if data["id"] in seen:
                print(f"[WARN] Duplicate pose id '{data['id']}' in {f.name}, skipping")
                continue
            seen.add(data["id"])
            catalog.append(PoseDefinition(**data))

    if not catalog:
        raise RuntimeError(f"No poses found. Put JSONs in {pose_dir}")
    return tuple(catalog)

def pick_pose(catalog, rng=None):
    # uniform, independent per round; repeats allowed
    return (rng or random).choice(catalog)
