# lchain

Small, composable building blocks for applications built around language
models: chat messages, prompt templates, conversation memory, document
splitting, vector-store retrieval and tools.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Messages and prompts

```python
from lchain.messages import Message
from lchain.prompt import template_fstring, template_jinja2, prompt_args

greeting = template_fstring("Hello {name}!", "name")
print(greeting.format(prompt_args(name="world")))  # Hello world!

jinja = template_jinja2("{{user}} says {{message}}", "user", "message")
print(jinja.format(prompt_args(user="Bob", message="Hi")))  # Bob says Hi
```

A template raises an error when one of its declared variables is missing
from the input.

## Chat formatting

```python
from lchain.chat import AIMessagePromptTemplate, MessagesPlaceholder, message_formatter
from lchain.messages import Message
from lchain.prompt import template_fstring, prompt_args

formatter = message_formatter(
    Message.human("Hello from user"),
    AIMessagePromptTemplate(template_fstring("AI response: {content}", "content")),
    MessagesPlaceholder("history"),
)

prompt = formatter.format_prompt(prompt_args(
    content="This is a test",
    history=[Message.human("earlier question"), Message.ai("earlier answer")],
))
for message in prompt.to_chat_messages():
    print(message.message_type, message.content)
```

## Memory

```python
from lchain.memory import SimpleMemory, WindowBufferMemory

memory = WindowBufferMemory(2)
memory.add_user_message("one")
memory.add_ai_message("two")
memory.add_user_message("three")   # the oldest message is dropped
print(str(memory))
```

`DummyMemory` remembers nothing; `SimpleMemory` keeps everything.

## Text splitting, vector stores and tools

- `lchain.text_splitter.TextSplitter` is the base for splitters: implement
  `split_text` and get `split_documents` and `create_documents` for free.
  `SplitterOptions` carries chunk size, model and encoding names.
- `lchain.vectorstore.VectorStore` is the interface for stores;
  `VectorStoreRetriever` turns one into a `Retriever`.
- `lchain.tools.Tool` is the interface for tools. `lchain.scraper.WebScraper`
  fetches a page and returns its visible text.
- `lchain.sql.SQLDatabase`, built with `build_database(engine, ...)`, wraps an
  `Engine` and renders query results and table descriptions as text.