from typing import Optional

from .conversation import ConversationStore
from .schemas import ConversationHistory, Language, Message, Role
from .strings import welcome_message


class TutorChat:
    """
    Chat panel state: one store, the active language, and a loading flag.

    Only one question is in flight at a time; a submit while loading is
    ignored, as is blank input.
    """

    def __init__(self, tutor, language: Language, store: Optional[ConversationStore] = None):
        self.tutor = tutor
        self.language = Language(language)
        self.store = store if store is not None else ConversationStore()
        self.loading = False
        self.store.reset(welcome_message(self.language))

    @property
    def messages(self) -> ConversationHistory:
        return self.store.snapshot()

    def select_language(self, language: Language) -> None:
        # the welcome message is seeded once; switching keeps the conversation
        self.language = Language(language)

    def submit(self, text: str) -> Optional[str]:
        if self.loading or not text or not text.strip():
            return None

        # history sent to the tutor excludes the question itself
        history = self.store.snapshot()
        self.store.append(Message(role=Role.USER, text=text))

        self.loading = True
        try:
            answer = self.tutor.ask(text, history, self.language)
        finally:
            self.loading = False

        self.store.append(Message(role=Role.MODEL, text=answer))
        return answer
