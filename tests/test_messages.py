import pytest

from lchain.messages import Message, MessageType, messages_from_value


def test_constructors_set_type():
    assert Message.human("Hello").message_type is MessageType.HUMAN
    assert Message.system("System Alert").message_type is MessageType.SYSTEM
    assert Message.ai("AI Response").message_type is MessageType.AI
    assert Message.ai("AI Response").content == "AI Response"


def test_constructor_stringifies_content():
    assert Message.human(42).content == str(42)


def test_default_message_is_system():
    assert Message().message_type is MessageType.SYSTEM
    assert Message().content == ""


def test_type_strings():
    assert str(Message.system("s").message_type) == "system"
    assert str(Message.ai("a").message_type) == "ai"
    assert str(Message.human("h").message_type) == "human"


def test_dict_round_trip():
    for msg in (Message.human("a"), Message.ai("b"), Message.system("c")):
        assert Message.from_dict(msg.to_dict()) == msg


def test_to_dict_wire_names():
    assert Message.human("Hello").to_dict() == {"content": "Hello", "message_type": "human"}


def test_from_dict_missing_field():
    with pytest.raises(ValueError):
        Message.from_dict({"content": "x"})


def test_from_dict_unknown_type():
    with pytest.raises(ValueError):
        Message.from_dict({"content": "x", "message_type": "robot"})


def test_messages_from_value_mixed():
    original = [Message.human("Placeholder message 1"), Message.ai("Placeholder message 2")]
    value = [original[0], original[1].to_dict()]
    assert messages_from_value(value) == original


def test_messages_from_value_rejects_non_sequence():
    with pytest.raises(ValueError):
        messages_from_value("not messages")
    with pytest.raises(ValueError):
        messages_from_value(3)