import random
from collections import namedtuple
from enum import Enum

from landmarks import to_sample
from poseCatalog import pick_pose
from poseMatcher import evaluate
from roundClock import ROUND_MS, TICK_MS, WARNING_MS, RoundClock

# --------------------
# GAME TUNING
# --------------------
START_LIVES    = 3
JUDGE_DELAY_MS = 0      # "analyzing..." pause between snapshot and verdict


class Phase(Enum):
    START = "START"
    PLAYING = "PLAYING"
    JUDGING = "JUDGING"
    RESULT = "RESULT"
    GAMEOVER = "GAMEOVER"


# external actions
E_START       = "start"
E_FORCE_JUDGE = "forceJudge"
E_CONTINUE    = "continue"
E_RESTART     = "restart"
# internal events
E_EXPIRE      = "expire"
E_JUDGED      = "judged"

TRANSITIONS = {
    (Phase.START, E_START): Phase.PLAYING,
    (Phase.PLAYING, E_EXPIRE): Phase.JUDGING,
    (Phase.PLAYING, E_FORCE_JUDGE): Phase.JUDGING,
    (Phase.JUDGING, E_JUDGED): Phase.RESULT,
    (Phase.RESULT, E_CONTINUE): Phase.PLAYING,
    (Phase.GAMEOVER, E_RESTART): Phase.START,
}

SessionSnapshot = namedtuple(
    "SessionSnapshot",
    ["phase", "score", "lives", "remaining_ms", "warning", "pose", "last_result", "round"],
)


def next_phase(phase, event, lives):
    """
    Pure transition table. Returns the next Phase, or None when the event
    means nothing in this phase.
    """
    nxt = TRANSITIONS.get((phase, event))
    if nxt is Phase.PLAYING and phase is Phase.RESULT and lives <= 0:
        return Phase.GAMEOVER
    return nxt


class GameSession:
    """
    Owns one game: lives, cumulative score, the active round and the latest
    landmark sample. Everything runs on the caller's thread; the host calls
    push_landmarks() per frame, tick() every tick_ms and dispatch() for
    player actions.
    """
    def __init__(self, catalog, judge=evaluate, rng=None,
                 round_ms=ROUND_MS, tick_ms=TICK_MS, warning_ms=WARNING_MS,
                 start_lives=START_LIVES, judge_delay_ms=JUDGE_DELAY_MS,
                 on_game_over=None, verbose=False):
        if not catalog:
            raise ValueError("GameSession needs at least one pose")
        if int(start_lives) <= 0:
            raise ValueError(f"start_lives must be positive, got {start_lives}")
        self.catalog = tuple(catalog)
        self.judge = judge
        self.rng = rng or random.Random()
        self.start_lives = int(start_lives)
        self.judge_delay_ms = int(judge_delay_ms)
        self.on_game_over = on_game_over
        self.verbose = verbose

        self.clock = RoundClock(round_ms, tick_ms, warning_ms)
        self.judge_clock = RoundClock(self.judge_delay_ms, tick_ms, 0)

        self.phase = Phase.START
        self.score = 0
        self.lives = self.start_lives
        self.round = 0
        self.pose = None
        self.last_result = None

        self._sample = None
        self._judge_sample = None
        self._judged = False

    # ------------------------------------------------------------
    # inputs
    # ------------------------------------------------------------
    def push_landmarks(self, landmarks, vis_gate=False):
        # whole-sample replacement, last value wins
        self._sample = to_sample(landmarks, vis_gate=vis_gate)

    def dispatch(self, event):
        """Apply a player/internal event. Returns False if it was a no-op here."""
        nxt = next_phase(self.phase, event, self.lives)
        if nxt is None:
            return False

        self._set_phase(nxt, event)

        if event == E_START:
            self._reset_totals()
            self._new_round()
        elif event == E_CONTINUE and nxt is Phase.PLAYING:
            self._new_round()
        elif nxt is Phase.JUDGING:
            self._begin_judging()
        elif nxt is Phase.START:
            self._reset_totals()
            self.pose = None
            self.last_result = None
            self.clock.reset()
        self._guard_lives()
        return True

    def start(self):
        return self.dispatch(E_START)

    def force_judge(self):
        return self.dispatch(E_FORCE_JUDGE)

    def continue_game(self):
        return self.dispatch(E_CONTINUE)

    def restart(self):
        return self.dispatch(E_RESTART)

    def tick(self):
        """One clock tick. Only Playing (round timer) and Judging (delay) consume ticks."""
        if self._guard_lives():
            return True
        if self.phase is Phase.PLAYING:
            if self.clock.tick():
                return self.dispatch(E_EXPIRE)
        elif self.phase is Phase.JUDGING and not self._judged:
            if self.judge_clock.tick():
                self._judge()
                return True
        return False

    # ------------------------------------------------------------
    # outputs
    # ------------------------------------------------------------
    @property
    def warning(self):
        return self.phase is Phase.PLAYING and self.clock.warning

    def snapshot(self):
        return SessionSnapshot(
            phase=self.phase,
            score=self.score,
            lives=self.lives,
            remaining_ms=self.clock.remaining_ms,
            warning=self.warning,
            pose=self.pose,
            last_result=self.last_result,
            round=self.round,
        )

    # ------------------------------------------------------------
    # internals
    # ------------------------------------------------------------
    def _set_phase(self, nxt, event):
        prev = self.phase
        self.phase = nxt
        if self.verbose:
            print(f"[INFO] {prev.value} --{event}--> {nxt.value}  score={self.score} lives={self.lives}")
        if nxt is Phase.GAMEOVER and self.on_game_over is not None:
            self.on_game_over(self.score)

    def _reset_totals(self):
        self.score = 0
        self.lives = self.start_lives
        self.round = 0

    def _new_round(self):
        self.pose = pick_pose(self.catalog, self.rng)
        self.round += 1
        self.last_result = None
        self._judge_sample = None
        self._judged = False
        self.clock.reset()

    def _begin_judging(self):
        self._judge_sample = self._sample
        if self.judge_delay_ms <= 0:
            self._judge()
        else:
            self.judge_clock.reset()

    def _judge(self):
        if self._judged:
            return None
        self._judged = True

        result = self.judge(self._judge_sample, self.pose)
        self.last_result = result
        if result.matched:
            self.score += max(0, int(result.score))
        else:
            self.lives = max(0, self.lives - 1)

        self.dispatch(E_JUDGED)
        return result

    def _guard_lives(self):
        if self.lives <= 0 and self.phase not in (Phase.GAMEOVER, Phase.START):
            self._set_phase(Phase.GAMEOVER, "out-of-lives")
            return True
        return False
