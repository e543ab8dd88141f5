from .schemas import Language, Message, Role

WELCOME_TEXT = {
    Language.EN: (
        "Hi! I'm your Optics Tutor. Ask me anything about lighting angles, "
        "reflection, or detection techniques."
    ),
    Language.ZH: "你好！我是你的光学助教。关于打光角度、明暗视野或检测难题，尽管问我。",
}

EMPTY_REPLY_TEXT = {
    Language.EN: "I couldn't generate a response regarding optics at the moment.",
    Language.ZH: "抱歉，我现在无法回答光学问题。",
}

ERROR_REPLY_TEXT = {
    Language.EN: "Error connecting to the Optics AI Tutor. Please check your API key.",
    Language.ZH: "连接 AI 导师失败，请检查 API 密钥。",
}

# --- Chat panel copy ---
CHAT_TITLE = {
    Language.EN: "AI Optics Consultant",
    Language.ZH: "AI 光学顾问",
}

INPUT_PLACEHOLDER = {
    Language.EN: "Ex: Why is low angle good for scratches?",
    Language.ZH: "例如：为什么低角度适合检测划痕？",
}

PAGE_CAPTION = {
    Language.EN: (
        "Bright field: light reflects straight into the camera, flat surfaces "
        "look bright and defects look dark. Dark field: low-angle light skims "
        "the surface, flat areas stay dark and scratches light up."
    ),
    Language.ZH: "明视野：光线直接反射进相机，平面明亮、缺陷发暗。暗视野：低角度光掠过表面，平面保持黑暗、划痕被点亮。",
}


def welcome_message(language: Language) -> Message:
    return Message(role=Role.MODEL, text=WELCOME_TEXT[language])
