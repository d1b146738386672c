"""Chat state of the AI code agent panel."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

WELCOME_LINES = (
    "Welcome! I'm your AI coding assistant.",
    "Ask me anything about your code!",
)


class QuickAction(Enum):
    """One-click requests offered below the chat input."""

    REVIEW_CODE = ("📝 Review Code", "AI: I'll review your code for improvements.")
    FIND_BUGS = ("🐛 Find Bugs", "AI: Scanning for potential bugs...")
    EXPLAIN_CODE = ("📚 Explain Code", "AI: I'll explain the current code for you.")
    OPTIMIZE = ("⚡ Optimize", "AI: Looking for optimization opportunities...")

    def __init__(self, label: str, reply: str):
        self.label = label
        self.reply = reply


@dataclass
class CodeAgent:
    """The chat input and the conversation so far."""

    chat_input: str = ""
    messages: list[str] = field(default_factory=list)

    def send(self, text: Optional[str] = None) -> bool:
        """Send ``text`` (or the current input) and record the reply.

        Blank text is ignored and False is returned. Sending the current
        input clears it.
        """
        from_input = text is None
        message = self.chat_input if from_input else text
        if not message.strip():
            return False
        self.messages.append(f"You: {message}")
        self.messages.append(f"AI: I received your message: '{message}'")
        if from_input:
            self.chat_input = ""
        return True

    def quick_action(self, action: QuickAction) -> str:
        """Record and return the reply to a quick action."""
        reply = QuickAction(action).reply
        self.messages.append(reply)
        return reply

    def visible_messages(self) -> list[str]:
        """Lines shown in the chat area: the conversation, or a welcome text."""
        return list(self.messages) if self.messages else list(WELCOME_LINES)