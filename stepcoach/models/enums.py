"""Enumerations used across models."""

from enum import Enum


class MessageRole(str, Enum):
    """Enum for message roles in a conversation.

    ``USER`` denotes a human message, ``ASSISTANT`` a reply from the
    model and ``SYSTEM`` an instruction that steers the model.
    """

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class AvatarState(str, Enum):
    """Visual tier of the user's companion avatar, from least to most fit."""

    FAT = "fat"
    NORMAL = "normal"
    FIT = "fit"
