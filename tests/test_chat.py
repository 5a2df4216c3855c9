import pytest

from lchain.chat import (
    AIMessagePromptTemplate,
    ChatMessageFormatter,
    HumanMessagePromptTemplate,
    MessagesPlaceholder,
    SystemMessagePromptTemplate,
    message_formatter,
)
from lchain.messages import Message, MessageType
from lchain.prompt import prompt_args, template_fstring


def test_message_formatter_helper():
    human_msg = Message.human("Hello from user")
    ai_message_prompt = AIMessagePromptTemplate(
        template_fstring("AI response: {content} {test}", "content", "test")
    )
    formatter = message_formatter(
        human_msg, ai_message_prompt, MessagesPlaceholder("history")
    )

    input_variables = prompt_args(
        content="This is a test",
        test="test2",
        history=[
            Message.human("Placeholder message 1"),
            Message.ai("Placeholder message 2"),
        ],
    )

    formatted = formatter.format_prompt(input_variables).to_chat_messages()

    assert len(formatted) == 4
    assert formatted[0].content == "Hello from user"
    assert formatted[1].content == "AI response: This is a test test2"
    assert formatted[2].content == "Placeholder message 1"
    assert formatted[3].content == "Placeholder message 2"


def test_templates_produce_their_message_types():
    template = template_fstring("say {x}", "x")
    args = {"x": "hi"}
    assert HumanMessagePromptTemplate(template).format_messages(args) == [
        Message("say hi", MessageType.HUMAN)
    ]
    assert SystemMessagePromptTemplate(template).format_messages(args) == [
        Message("say hi", MessageType.SYSTEM)
    ]
    assert AIMessagePromptTemplate(template).format_messages(args) == [
        Message("say hi", MessageType.AI)
    ]


def test_template_input_variables():
    template = SystemMessagePromptTemplate(template_fstring("{a} {b}", "a", "b"))
    assert template.input_variables() == ["a", "b"]
    assert template.get_input_variables() == ["a", "b"]


def test_template_missing_variable_raises():
    template = HumanMessagePromptTemplate(template_fstring("{a}", "a"))
    with pytest.raises(ValueError, match="a"):
        template.format_prompt({})


def test_formatter_input_variables_in_order():
    formatter = ChatMessageFormatter()
    formatter.add_message(Message.system("fixed"))
    formatter.add_template(HumanMessagePromptTemplate(template_fstring("{q}", "q")))
    formatter.add_messages_placeholder("history")
    formatter.add_template(AIMessagePromptTemplate(template_fstring("{r}", "r")))
    assert formatter.input_variables() == ["q", "history", "r"]
    assert len(formatter) == 4


def test_placeholder_accepts_message_dicts():
    formatter = message_formatter(MessagesPlaceholder("history"))
    messages = formatter.format_messages(
        {"history": [{"content": "hey", "message_type": "ai"}]}
    )
    assert messages == [Message("hey", MessageType.AI)]


def test_missing_placeholder_raises():
    formatter = message_formatter(MessagesPlaceholder("history"))
    with pytest.raises(KeyError):
        formatter.format_messages({})


def test_bad_placeholder_value_raises():
    formatter = message_formatter(MessagesPlaceholder("history"))
    with pytest.raises(ValueError):
        formatter.format_messages({"history": "not a list"})


def test_unknown_item_type_raises():
    with pytest.raises(TypeError):
        message_formatter(42)


def test_nested_formatter_as_template():
    inner = message_formatter(Message.human("inner"))
    outer = message_formatter(Message.system("outer"), inner)
    assert [m.content for m in outer.format_messages({})] == ["outer", "inner"]


def test_format_prompt_string_rendering():
    formatter = message_formatter(
        Message.system("be brief"),
        HumanMessagePromptTemplate(template_fstring("{q}", "q")),
    )
    assert str(formatter.format_prompt({"q": "why?"})) == "system: be brief\nhuman: why?"