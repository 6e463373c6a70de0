from __future__ import annotations

from stepcoach.models.enums import AvatarState
from stepcoach.services.prompt_service import (
    BASE_SYSTEM_PROMPT,
    compose_system_prompt,
    progress_percent,
)


def test_base_prompt_only_without_progress() -> None:
    assert compose_system_prompt() == BASE_SYSTEM_PROMPT
    assert compose_system_prompt(step_count=5000) == BASE_SYSTEM_PROMPT
    assert compose_system_prompt(goal=10000) == BASE_SYSTEM_PROMPT
    assert compose_system_prompt(avatar_state=AvatarState.FIT) == BASE_SYSTEM_PROMPT


def test_base_prompt_describes_role_and_tone() -> None:
    assert "fitness tracking app" in BASE_SYSTEM_PROMPT
    assert "fat -> normal -> fit" in BASE_SYSTEM_PROMPT
    assert "encouraging and supportive" in BASE_SYSTEM_PROMPT


def test_below_goal_reports_remaining_steps() -> None:
    prompt = compose_system_prompt(5000, 10000)

    assert prompt.startswith(BASE_SYSTEM_PROMPT)
    assert "- Steps taken: 5,000" in prompt
    assert "- Daily goal: 10,000 steps" in prompt
    assert "- Progress: 50%" in prompt
    assert "- Steps remaining: 5,000" in prompt
    assert "The user is 5,000 steps away from their daily goal." in prompt
    assert "reached their daily goal" not in prompt
    assert "exceeded" not in prompt


def test_goal_reached_band() -> None:
    prompt = compose_system_prompt(12000, 10000)

    assert "- Progress: 120%" in prompt
    assert "- Steps remaining: 0" in prompt
    assert "The user has reached their daily goal!" in prompt
    assert "steps away" not in prompt
    assert "exceeded" not in prompt


def test_goal_reached_band_starts_exactly_at_goal() -> None:
    prompt = compose_system_prompt(10000, 10000)

    assert "- Progress: 100%" in prompt
    assert "The user has reached their daily goal!" in prompt


def test_over_achievement_band_starts_at_twice_the_goal() -> None:
    just_below = compose_system_prompt(19999, 10000)
    at_double = compose_system_prompt(20000, 10000)

    assert "reached their daily goal" in just_below
    assert "The user has exceeded their daily goal significantly!" in at_double
    assert "- Progress: 200%" in at_double


def test_zero_steps() -> None:
    prompt = compose_system_prompt(0, 8000)

    assert "- Progress: 0%" in prompt
    assert "The user is 8,000 steps away" in prompt


def test_avatar_state_line_only_when_present() -> None:
    with_avatar = compose_system_prompt(3000, 6000, AvatarState.NORMAL)
    without_avatar = compose_system_prompt(3000, 6000)

    assert "- Avatar state: normal" in with_avatar
    assert "Avatar state" not in without_avatar


def test_avatar_state_accepts_plain_label() -> None:
    assert "- Avatar state: fat" in compose_system_prompt(100, 6000, "fat")


def test_progress_block_layout() -> None:
    prompt = compose_system_prompt(1234, 5000, AvatarState.FIT)

    expected_block = (
        "Current user progress:\n"
        "- Steps taken: 1,234\n"
        "- Daily goal: 5,000 steps\n"
        "- Progress: 25%\n"
        "- Steps remaining: 3,766\n"
        "- Avatar state: fit"
    )
    assert prompt == (
        BASE_SYSTEM_PROMPT
        + "\n\n"
        + expected_block
        + "\n\nThe user is 3,766 steps away from their daily goal. "
        "Provide encouraging suggestions to help them reach it."
    )


def test_progress_percent_rounds_to_nearest() -> None:
    assert progress_percent(5000, 10000) == 50
    assert progress_percent(1, 3) == 33
    assert progress_percent(2, 3) == 67
    assert progress_percent(1, 8) == 13
    assert progress_percent(1, 200) == 1
    assert progress_percent(1, 201) == 0


def test_composition_is_deterministic() -> None:
    assert compose_system_prompt(4321, 9000, "fit") == compose_system_prompt(4321, 9000, "fit")
