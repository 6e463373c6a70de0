"""Expose commonly used model classes at the package level.

Importing these classes here allows consumers to write concise imports like::

    from stepcoach.models import ChatRequest, ChatResponse
"""

from .chat_message import ChatMessage  # noqa: F401
from .chat_request import ChatRequest, parse_chat_request  # noqa: F401
from .chat_response import ChatResponse  # noqa: F401
from .enums import AvatarState, MessageRole  # noqa: F401
