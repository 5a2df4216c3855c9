"""Splitting text and documents into chunks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from lchain.schemas import Document


@dataclass
class SplitterOptions:
    """Settings shared by text splitters."""

    chunk_size: int = 512
    model_name: str = "gpt-3.5-turbo"
    encoding_name: str = "cl100k_base"
    trim_chunks: bool = False


class TextSplitter(ABC):
    """Something that cuts text into chunks."""

    @abstractmethod
    def split_text(self, text: str) -> list[str]:
        """Return the chunks of `text`."""

    def split_documents(self, documents: Iterable[Document]) -> list[Document]:
        """Split each document, keeping its metadata on every chunk."""
        documents = list(documents)
        return self.create_documents(
            [doc.page_content for doc in documents],
            [doc.metadata for doc in documents],
        )

    def create_documents(
        self,
        texts: Sequence[str],
        metadatas: Sequence[dict[str, Any]] = (),
    ) -> list[Document]:
        """Split texts into documents, pairing each text with its metadata.

        With no metadata given, every chunk gets empty metadata. Raises
        ValueError when the numbers of texts and metadata differ.
        """
        metadatas = list(metadatas) or [{} for _ in texts]
        if len(texts) != len(metadatas):
            raise ValueError("Mismatch metadatas and text")

        return [
            Document(chunk, dict(metadata))
            for text, metadata in zip(texts, metadatas)
            for chunk in self.split_text(text)
        ]