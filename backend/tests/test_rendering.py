from __future__ import annotations

import pytest

from models import Continue, GuessSession, Hint, Lose, Tone, Win
from services import rendering
from services.dialogue_engine import DialogueEngine


def test_non_terminal_scene_gets_one_control_per_choice() -> None:
    scene = DialogueEngine().resolve("start")
    request = rendering.render_scene(scene)
    assert request.body == scene.text
    assert [c.custom_id for c in request.controls] == [f"adv_{c.next_key}" for c in scene.choices]
    assert [c.label for c in request.controls] == [c.label for c in scene.choices]
    assert request.tone is Tone.ADVENTURE


def test_terminal_scene_gets_single_restart_control() -> None:
    request = rendering.render_scene(DialogueEngine().resolve("quest_complete"))
    assert len(request.controls) == 1
    assert request.controls[0].custom_id == "adv_start"


def test_fallback_scene_links_to_start() -> None:
    request = rendering.render_scene(DialogueEngine().resolve("nope"))
    assert [c.custom_id for c in request.controls] == ["adv_start"]


def test_outcome_rendering() -> None:
    win = rendering.render_outcome(Win(attempts=2, number=7))
    assert "7" in win.body and "2 attempts" in win.body
    assert win.tone is Tone.SUCCESS
    assert win.controls[0].custom_id == "play_guessing"

    lose = rendering.render_outcome(Lose(attempts=3, number=2))
    assert "2" in lose.body
    assert lose.tone is Tone.FAILURE

    higher = rendering.render_outcome(Continue(hint=Hint.HIGHER, attempts=1, max_attempts=3))
    assert "higher" in higher.body
    assert "1/3" in higher.body

    lower = rendering.render_outcome(Continue(hint=Hint.LOWER, attempts=2, max_attempts=3))
    assert "lower" in lower.body


def test_single_attempt_win_is_singular() -> None:
    assert "1 attempt!" in rendering.render_outcome(Win(attempts=1, number=4)).body


def test_menu_offers_both_games_and_help() -> None:
    ids = [c.custom_id for c in rendering.render_menu().controls]
    assert ids == ["play_guessing", "play_adventure", "show_help"]


def test_guess_started_mentions_range_and_attempts() -> None:
    body = rendering.render_guess_started(GuessSession(user_id="u1", target=5)).body
    assert "1 and 10" in body
    assert "3 attempts" in body


def test_stats_shows_active_games() -> None:
    assert "**4**" in rendering.render_stats(4, 17).body


def test_unknown_outcome_fails_loudly() -> None:
    with pytest.raises(AssertionError):
        rendering.render_outcome(object())  # type: ignore[arg-type]
