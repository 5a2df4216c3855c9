"""Vector store interface, its options and a retriever built on it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from lchain.schemas import Document, Retriever


@dataclass
class VecStoreOptions:
    """Options for adding to and searching a vector store."""

    name_space: str | None = None
    score_threshold: float | None = None
    filters: Any = None
    embedder: Any = None


class VectorStore(ABC):
    """Saves documents as vector embeddings and searches them.

    An `options` of None means default options.
    """

    @abstractmethod
    async def add_documents(
        self, docs: Sequence[Document], options: VecStoreOptions | None = None
    ) -> list[str]:
        """Store the documents and return their ids."""

    @abstractmethod
    async def similarity_search(
        self, query: str, limit: int, options: VecStoreOptions | None = None
    ) -> list[Document]:
        """Return up to `limit` documents most similar to `query`."""


class VectorStoreRetriever(Retriever):
    """A retriever that asks a vector store for the closest documents."""

    def __init__(
        self,
        vstore: VectorStore,
        num_docs: int,
        options: VecStoreOptions | None = None,
    ) -> None:
        self.vstore = vstore
        self.num_docs = num_docs
        self.options = options if options is not None else VecStoreOptions()

    async def get_relevant_documents(self, query: str) -> list[Document]:
        return await self.vstore.similarity_search(query, self.num_docs, self.options)