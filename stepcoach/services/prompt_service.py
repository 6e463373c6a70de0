"""System prompt composition from the user's step progress."""

from __future__ import annotations

from typing import Optional

from ..models.enums import AvatarState

BASE_SYSTEM_PROMPT = (
    "You are a helpful assistant for a fitness tracking app.\n"
    "The app tracks steps and has an avatar that changes based on progress (fat -> normal -> fit).\n"
    "Users can ask you questions about their fitness progress, goals, or general health advice.\n"
    "Be encouraging and supportive."
)

BELOW_GOAL_LINE = (
    "The user is {remaining} steps away from their daily goal. "
    "Provide encouraging suggestions to help them reach it."
)
GOAL_REACHED_LINE = (
    "The user has reached their daily goal! Encourage them to keep going for extra benefits."
)
GOAL_EXCEEDED_LINE = (
    "The user has exceeded their daily goal significantly! Celebrate their achievement."
)


def format_count(value: int) -> str:
    """Render an integer with comma thousands separators."""
    return f"{value:,}"


def progress_percent(step_count: int, goal: int) -> int:
    """Return ``100 * step_count / goal`` rounded to the nearest integer.

    Halves round up, computed in integers so large counts stay exact.
    """
    return (200 * step_count + goal) // (2 * goal)


def tone_line(step_count: int, goal: int) -> str:
    if step_count < goal:
        return BELOW_GOAL_LINE.format(remaining=format_count(goal - step_count))
    if step_count < 2 * goal:
        return GOAL_REACHED_LINE
    return GOAL_EXCEEDED_LINE


def compose_system_prompt(
    step_count: Optional[int] = None,
    goal: Optional[int] = None,
    avatar_state: Optional[AvatarState | str] = None,
) -> str:
    """Build the system instruction prepended to the conversation.

    Without both ``step_count`` and ``goal`` only the base instruction
    is returned.  Otherwise a progress block and a single tone line are
    appended; the tone depends on whether the user is below the goal,
    between one and two times the goal, or at least twice the goal.
    """
    if step_count is None or goal is None:
        return BASE_SYSTEM_PROMPT

    remaining = max(0, goal - step_count)
    progress_lines = [
        "Current user progress:",
        f"- Steps taken: {format_count(step_count)}",
        f"- Daily goal: {format_count(goal)} steps",
        f"- Progress: {progress_percent(step_count, goal)}%",
        f"- Steps remaining: {format_count(remaining)}",
    ]
    if avatar_state:
        label = avatar_state.value if isinstance(avatar_state, AvatarState) else avatar_state
        progress_lines.append(f"- Avatar state: {label}")

    return "\n\n".join([BASE_SYSTEM_PROMPT, "\n".join(progress_lines), tone_line(step_count, goal)])
