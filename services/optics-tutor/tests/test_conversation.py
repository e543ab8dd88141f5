from optics_tutor.conversation import ConversationStore
from optics_tutor.schemas import Message, Role


WELCOME = Message(role=Role.MODEL, text="Hi! I'm your Optics Tutor.")


def test_store_starts_empty():
    store = ConversationStore()
    assert store.snapshot() == ()
    assert len(store) == 0


def test_reset_then_append_keeps_call_order():
    store = ConversationStore()
    store.reset(WELCOME)

    store.append(Message(role=Role.USER, text="What is dark field?"))
    store.append(Message(role=Role.MODEL, text="Low-angle light..."))
    store.append(Message(role=Role.USER, text="And bright field?"))

    history = store.snapshot()
    assert [m.text for m in history] == [
        "Hi! I'm your Optics Tutor.",
        "What is dark field?",
        "Low-angle light...",
        "And bright field?",
    ]
    assert history[0] == WELCOME


def test_append_does_not_require_alternation():
    store = ConversationStore()
    store.append(Message(role=Role.USER, text="one"))
    store.append(Message(role=Role.USER, text="two"))
    store.append(Message(role=Role.MODEL, text=""))
    store.append(Message(role=Role.MODEL, text="three"))

    roles = [m.role for m in store.snapshot()]
    assert roles == [Role.USER, Role.USER, Role.MODEL, Role.MODEL]


def test_snapshot_is_not_affected_by_later_appends():
    store = ConversationStore()
    store.reset(WELCOME)

    before = store.snapshot()
    store.append(Message(role=Role.USER, text="later"))

    assert len(before) == 1
    assert len(store.snapshot()) == 2


def test_reset_is_idempotent():
    store = ConversationStore()
    store.append(Message(role=Role.USER, text="hello"))

    store.reset(WELCOME)
    store.reset(WELCOME)

    assert store.snapshot() == (WELCOME,)


def test_reset_discards_previous_conversation():
    store = ConversationStore()
    store.reset(WELCOME)
    store.append(Message(role=Role.USER, text="hello"))

    other = Message(role=Role.MODEL, text="你好！")
    store.reset(other)

    assert store.snapshot() == (other,)
