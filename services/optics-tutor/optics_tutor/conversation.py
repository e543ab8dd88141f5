from typing import List

from .schemas import ConversationHistory, Message


class ConversationStore:
    """In-memory, append-only dialogue of one chat session."""

    def __init__(self):
        self._messages: List[Message] = []

    def __len__(self) -> int:
        return len(self._messages)

    def append(self, message: Message) -> None:
        # roles are not required to alternate
        self._messages.append(message)

    def snapshot(self) -> ConversationHistory:
        return tuple(self._messages)

    def reset(self, welcome_message: Message) -> None:
        self._messages = [welcome_message]
