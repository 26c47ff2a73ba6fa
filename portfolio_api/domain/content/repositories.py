# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

Document = dict[str, Any]


class DocumentStore(Protocol):
    def find_all(self, collection: str, *, newest_first: bool = False) -> list[Document]: ...
    def find_one(self, collection: str, document_id: str) -> Document | None: ...
    def insert(self, collection: str, data: Mapping[str, Any]) -> str: ...
    def update(self, collection: str, document_id: str, changes: Mapping[str, Any]) -> bool: ...
    def delete(self, collection: str, document_id: str) -> bool: ...
    def find_singleton(self, collection: str) -> Document | None: ...
    def replace_singleton(self, collection: str, data: Mapping[str, Any]) -> None: ...
