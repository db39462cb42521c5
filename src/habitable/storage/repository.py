# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Record repositories.

A repository stores immutable records keyed by their `id`. The engine only
needs get, put, delete and list; storage technology is an implementation
detail of each subclass.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Dict, Generic, Iterator, List, TypeVar, Union

from pydantic import BaseModel

from ..core.errors import RecordNotFoundError

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class Repository(ABC, Generic[R]):
    """Abstract keyed store of records."""

    @abstractmethod
    def get(self, record_id: str) -> R:
        """
        Return the record stored under `record_id`.

        Raises:
            RecordNotFoundError: If no such record exists
        """

    @abstractmethod
    def put(self, record: R) -> R:
        """Insert or replace a record under its `id` and return it."""

    @abstractmethod
    def delete(self, record_id: str) -> None:
        """
        Remove a record.

        Raises:
            RecordNotFoundError: If no such record exists
        """

    @abstractmethod
    def list(self) -> List[R]:
        """All records in insertion order."""

    def __contains__(self, record_id: object) -> bool:
        try:
            self.get(record_id)  # type: ignore[arg-type]
        except RecordNotFoundError:
            return False
        return True

    def __iter__(self) -> Iterator[R]:
        return iter(self.list())

    def __len__(self) -> int:
        return len(self.list())


class InMemoryRepository(Repository[R]):
    """Dictionary-backed repository, for tests and short-lived sessions."""

    def __init__(self) -> None:
        self._records: Dict[str, R] = {}

    def get(self, record_id: str) -> R:
        try:
            return self._records[record_id]
        except KeyError:
            raise RecordNotFoundError(f"No record with id '{record_id}'") from None

    def put(self, record: R) -> R:
        self._records[record.id] = record
        return record

    def delete(self, record_id: str) -> None:
        if record_id not in self._records:
            raise RecordNotFoundError(f"No record with id '{record_id}'")
        del self._records[record_id]

    def list(self) -> List[R]:
        return list(self._records.values())


class JsonFileRepository(Repository[R]):
    """
    Repository persisted as one JSON document per collection.

    The document is an object mapping ids to records serialized with
    `model_dump(mode="json")`. It is read on every call and rewritten on
    every change, so several repositories may share a directory but not a
    file.

    Args:
        path: Location of the collection's JSON document; created on first write
        parse: Callable turning a stored mapping back into a record, e.g.
            `Project.model_validate` or `parse_scenario`
    """

    def __init__(self, path: Union[str, Path], parse: Callable[[dict], R]) -> None:
        self.path = Path(path)
        self._parse = parse

    def _read(self) -> Dict[str, dict]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as f:
            return json.load(f)

    def _write(self, documents: Dict[str, dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(documents, f, indent=2)
        tmp_path.replace(self.path)
        logger.debug(f"Wrote {len(documents)} records to {self.path}")

    def get(self, record_id: str) -> R:
        documents = self._read()
        if record_id not in documents:
            raise RecordNotFoundError(f"No record with id '{record_id}' in {self.path.name}")
        return self._parse(documents[record_id])

    def put(self, record: R) -> R:
        documents = self._read()
        documents[record.id] = record.model_dump(mode="json")
        self._write(documents)
        return record

    def delete(self, record_id: str) -> None:
        documents = self._read()
        if record_id not in documents:
            raise RecordNotFoundError(f"No record with id '{record_id}' in {self.path.name}")
        del documents[record_id]
        self._write(documents)

    def list(self) -> List[R]:
        return [self._parse(document) for document in self._read().values()]
