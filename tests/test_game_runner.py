import pytest

pytest.importorskip("cv2")
pytest.importorskip("mediapipe")
requests = pytest.importorskip("requests")

import game  # noqa: E402
from conftest import CATALOG, StubJudge  # noqa: E402
from gameSession import GameSession, Phase  # noqa: E402
from loadHelpers import load_settings  # noqa: E402
from poseMatcher import MatchResult  # noqa: E402


def test_notify_failure_is_only_a_warning(monkeypatch, capsys):
    def boom(*a, **kw):
        raise requests.ConnectionError("offline")
    monkeypatch.setattr(game.requests, "get", boom)
    game.notify_game_over("http://localhost:9/over", 120)
    assert "[WARN]" in capsys.readouterr().out


def test_notify_sends_score(monkeypatch):
    calls = []
    monkeypatch.setattr(game.requests, "get", lambda url, **kw: calls.append((url, kw)))
    game.notify_game_over("http://example.invalid/over", 42)
    assert calls[0][0] == "http://example.invalid/over"
    assert calls[0][1]["params"] == {"score": 42}


def test_space_key_walks_the_phases():
    s = GameSession(CATALOG, judge=StubJudge(MatchResult(False, 0, "x")))
    game.handle_key(s, ord(" "))
    assert s.phase is Phase.PLAYING
    game.handle_key(s, ord(" "))
    assert s.phase is Phase.PLAYING
    game.handle_key(s, ord("j"))
    assert s.phase is Phase.RESULT
    game.handle_key(s, ord(" "))
    assert s.phase is Phase.PLAYING


def test_build_session_uses_settings():
    settings = load_settings()
    settings.update(round_ms=3000, start_lives=5, seed=3)
    s = game.build_session(settings, CATALOG)
    assert s.clock.duration_ms == 3000
    assert s.lives == 5
    assert s.judge_delay_ms == 800
    assert s.on_game_over is None


def test_hud_draws_every_phase():
    import numpy as np
    from hudDraw import draw_hud

    s = GameSession(CATALOG, judge=StubJudge(*[MatchResult(False, 0, "x")] * 3))
    frames = []
    for action in (None, s.start, s.force_judge, s.continue_game, s.force_judge,
                   s.continue_game, s.force_judge):
        if action:
            action()
        frame = np.zeros((720, 1280, 3), dtype=np.uint8)
        draw_hud(frame, s.snapshot(), round_ms=8000)
        frames.append(frame)
    assert s.phase is Phase.GAMEOVER
    assert all(f.any() for f in frames)
