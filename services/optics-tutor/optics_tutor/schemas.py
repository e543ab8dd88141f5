from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, model_validator


class Role(str, Enum):
    USER = "user"
    MODEL = "model"


class Language(str, Enum):
    EN = "en"
    ZH = "zh"


class Message(BaseModel):
    """One turn of the conversation. Frozen once created."""

    model_config = ConfigDict(frozen=True)

    role: Role
    text: str

    @model_validator(mode="after")
    def _user_text_required(self) -> "Message":
        if self.role is Role.USER and not self.text.strip():
            raise ValueError("user messages must carry text")
        return self


ConversationHistory = Tuple[Message, ...]
