#!/usr/bin/env python3
import argparse
import os
import random
import time

import cv2
import mediapipe as mp
import requests

from gameSession import GameSession, Phase, E_CONTINUE, E_FORCE_JUDGE, E_RESTART, E_START
from hudDraw import draw_hud
from loadHelpers import load_settings
from poseCatalog import load_catalog

# ============================================================
# HOLE IN THE WALL (Pose Edition)
# - match the pose before the wall arrives
# - webcam -> MediaPipe Pose -> GameSession (ticks + actions) -> HUD
# ============================================================

# --------------------
# DISPLAY / CAMERA
# --------------------
os.environ.setdefault("DISPLAY", ":0")

W, H = 1280, 720
FPS = 30
FRAME_TIME = 1.0 / FPS
WINDOW_NAME = "HOLE IN THE WALL (POSE)"
NOTIFY_TIMEOUT_SEC = 2.0

# SPACE means whatever moves the game forward in the current phase
SPACE_ACTION = {
    Phase.START: E_START,
    Phase.RESULT: E_CONTINUE,
    Phase.GAMEOVER: E_RESTART,
}


def notify_game_over(url, score):
    try:
        requests.get(url, params={"score": score}, timeout=NOTIFY_TIMEOUT_SEC)
    except requests.RequestException as e:
        print(f"[WARN] Game-over notify to {url} failed: {e}")

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Match the pose before the wall arrives")
    parser.add_argument("--settings", default=None, help="JSON file overriding the default tuning")
    parser.add_argument("--camera", type=int, default=None, help="OpenCV camera index")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the pose draw")
    return parser.parse_args(argv)

def build_session(settings, catalog):
    url = settings["game_over_url"]
    return GameSession(
        catalog,
        rng=random.Random(settings["seed"]),
        round_ms=settings["round_ms"],
        tick_ms=settings["tick_ms"],
        warning_ms=settings["warning_ms"],
        start_lives=settings["start_lives"],
        judge_delay_ms=settings["judge_delay_ms"],
        on_game_over=(lambda score: notify_game_over(url, score)) if url else None,
        verbose=True,
    )

def handle_key(session, key):
    if key == ord(" "):
        event = SPACE_ACTION.get(session.phase)
        if event:
            session.dispatch(event)
    elif key == ord("j"):
        session.dispatch(E_FORCE_JUDGE)


# ============================================================
# MAIN
# ============================================================
def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)
    if args.camera is not None:
        settings["camera_index"] = args.camera
    if args.seed is not None:
        settings["seed"] = args.seed

    catalog = load_catalog()
    print("Loaded poses:", [p.id for p in catalog])
    session = build_session(settings, catalog)

    cap = cv2.VideoCapture(settings["camera_index"])
    if not cap.isOpened():
        raise RuntimeError(f"Cannot open camera {settings['camera_index']}")
    cap.set(cv2.CAP_PROP_FRAME_WIDTH, W)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, H)

    mp_pose = mp.solutions.pose
    mp_draw = mp.solutions.drawing_utils

    pose = mp_pose.Pose(
        static_image_mode=False,
        model_complexity=0,
        smooth_landmarks=True,
        enable_segmentation=False,
        min_detection_confidence=0.5,
        min_tracking_confidence=0.5,
    )

    cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_NORMAL)
    cv2.resizeWindow(WINDOW_NAME, W, H)

    tick_sec = settings["tick_ms"] / 1000.0
    print("✅ MediaPipe Pose running. SPACE to play, 'q' to quit.")
    try:
        last_tick = time.time()
        while True:
            t0 = time.time()
            ok, frame = cap.read()
            if not ok or frame is None:
                print("[WARN] Camera returned no frame, stopping.")
                break

            # landmarks come from the raw frame; only the display is mirrored
            rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
            res = pose.process(rgb)

            if res.pose_landmarks:
                mp_draw.draw_landmarks(frame, res.pose_landmarks, mp_pose.POSE_CONNECTIONS)
                session.push_landmarks(res.pose_landmarks.landmark, vis_gate=settings["vis_gate"])
            else:
                session.push_landmarks(None)

            # wall clock -> fixed-size ticks
            now = time.time()
            while now - last_tick >= tick_sec:
                last_tick += tick_sec
                session.tick()

            if settings["mirror"]:
                frame = cv2.flip(frame, 1)
            draw_hud(frame, session.snapshot(), settings["round_ms"], settings["start_lives"])
            cv2.imshow(WINDOW_NAME, frame)

            key = cv2.waitKey(1) & 0xFF
            if key == ord("q"):
                break
            handle_key(session, key)

            elapsed = time.time() - t0
            sleep_for = FRAME_TIME - elapsed
            if sleep_for > 0:
                time.sleep(sleep_for)

    finally:
        print("👋 Shutting down...")
        cap.release()
        pose.close()
        cv2.destroyAllWindows()

if __name__ == "__main__":
    main()
