import cv2

from gameSession import Phase

WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
RED   = (60, 60, 240)
CYAN  = (212, 182, 6)
GREY  = (200, 200, 200)

PHASE_HINT = {
    Phase.START: "SPACE: start   Q: quit",
    Phase.PLAYING: "J: judge now",
    Phase.JUDGING: "Analyzing...",
    Phase.RESULT: "SPACE: next wall",
    Phase.GAMEOVER: "SPACE: restart   Q: quit",
}


def draw_hud(frame, snap, round_ms, start_lives=3):
    h, w = frame.shape[:2]
    cv2.rectangle(frame, (0,0), (w, 90), (0,0,0), -1)
    hearts = "O " * snap.lives + "x " * max(0, start_lives - snap.lives)
    cv2.putText(frame, f"SCORE: {snap.score}   LIVES: {hearts.strip()}", (20, 55),
                cv2.FONT_HERSHEY_SIMPLEX, 1.2, WHITE, 3)

    # incoming wall
    if snap.phase is Phase.PLAYING and snap.pose is not None:
        color = RED if snap.warning else CYAN
        bar_w = int((w - 40) * snap.remaining_ms / max(1, round_ms))
        cv2.rectangle(frame, (20, 100), (20 + bar_w, 120), color, -1)
        cv2.putText(frame, snap.pose.name.upper(), (20, 170),
                    cv2.FONT_HERSHEY_SIMPLEX, 1.4, color, 4)
        cv2.putText(frame, snap.pose.description[:70], (20, 215),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.8, GREY, 2)

    if snap.phase is Phase.GAMEOVER:
        cv2.putText(frame, f"GAME OVER  final score {snap.score}", (20, 170),
                    cv2.FONT_HERSHEY_SIMPLEX, 1.4, RED, 4)

    # result / hint bar
    y = h - 90
    cv2.rectangle(frame, (0,y), (w, h), (0,0,0), -1)
    res = snap.last_result
    if res is not None:
        label = f"MATCH +{res.score}" if res.matched else "MISS"
        cv2.putText(frame, f"{label}  {res.feedback}"[:80], (20, y+35),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.8, GREEN if res.matched else RED, 2)
    cv2.putText(frame, PHASE_HINT[snap.phase], (20, y+70), cv2.FONT_HERSHEY_SIMPLEX, 0.8, GREY, 2)
