from __future__ import annotations

from typing import Dict, List

from .schemas import ConversationHistory, Language, Role

LANGUAGE_DIRECTIVES = {
    Language.ZH: (
        "Reply in Simplified Chinese. Explain concepts using standard "
        "Machine Vision terminology in Chinese."
    ),
    Language.EN: "Reply in English.",
}

SYSTEM_TEMPLATE = """You are an expert Professor of Machine Vision and Optics.
Your goal is to explain lighting techniques to students simply and clearly.

Current Topic: Bright Field vs. Dark Field Lighting.

Rules:
1. {language_directive}
2. Keep answers concise (under 150 words) unless asked for detail.
3. Use analogies (e.g., "like a mirror" or "like driving in fog").
4. Focus on the physics of reflection (Angle of Incidence = Angle of Reflection).
5. Formatting: Use bullet points for clarity.
"""


def build_system_instruction(language: Language) -> str:
    return SYSTEM_TEMPLATE.format(language_directive=LANGUAGE_DIRECTIVES[language])


def _turn(role: Role, text: str) -> Dict:
    return {"role": role.value, "parts": [{"text": text}]}


def build_contents(history: ConversationHistory, query: str) -> List[Dict]:
    """
    Full history, oldest first, followed by the new question as a user turn.
    Nothing is dropped or summarized; the backend keeps no state between calls.
    """
    contents = [_turn(m.role, m.text) for m in history]
    contents.append(_turn(Role.USER, query))
    return contents
