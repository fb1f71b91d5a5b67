"""
JSON-file persistence adapter.

The whole database is a single document rewritten on every mutation. Services
go through ``transaction()`` so each load -> mutate -> save cycle runs under
one lock; writes land in a temp file that replaces the target atomically.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import ContextManager, Iterator, Protocol
import copy
import json
import os
import tempfile
import threading

import structlog

from blogapi.domain.models import Document

logger = structlog.get_logger()


class Store(Protocol):
    def load(self) -> Document: ...

    def save(self, doc: Document) -> None: ...

    def transaction(self) -> ContextManager[Document]: ...

    def snapshot(self) -> ContextManager[Document]: ...


class _LockedStore(ABC):
    """Shared transaction logic; subclasses provide load/save."""

    def __init__(self) -> None:
        self._lock = threading.RLock()

    @abstractmethod
    def load(self) -> Document: ...

    @abstractmethod
    def save(self, doc: Document) -> None: ...

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        """Yield a fresh copy of the document; persist it if the block succeeds."""
        with self._lock:
            doc = self.load()
            yield doc
            self.save(doc)

    @contextmanager
    def snapshot(self) -> Iterator[Document]:
        """Read-only view taken under the lock (nothing is written back)."""
        with self._lock:
            yield self.load()


class JsonFileStore(_LockedStore):
    def __init__(self, path: str | os.PathLike) -> None:
        super().__init__()
        self.path = Path(path)

    def load(self) -> Document:
        if not self.path.exists():
            return Document()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                return Document.from_dict(json.load(f))
        except (ValueError, TypeError, AttributeError) as exc:
            logger.warning("store.corrupt_document", path=str(self.path), error=str(exc))
            return Document()

    def save(self, doc: Document) -> None:
        payload = json.dumps(doc.to_dict(), ensure_ascii=False, indent=2)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise


class MemoryStore(_LockedStore):
    """Keeps the document in process memory; handy for tests and embedding."""

    def __init__(self, doc: Document | None = None) -> None:
        super().__init__()
        self._doc = copy.deepcopy(doc) if doc else Document()

    def load(self) -> Document:
        return copy.deepcopy(self._doc)

    def save(self, doc: Document) -> None:
        self._doc = copy.deepcopy(doc)
