# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .collections import (
    CONTACT_INFO,
    CONTACT_MESSAGES,
    HOME_PAGE,
    LIST_COLLECTIONS,
    PROJECTS,
    SINGLETON_COLLECTIONS,
    ContentCollection,
    SingletonCollection,
)
from .repositories import Document, DocumentStore

__all__ = [
    "CONTACT_INFO",
    "CONTACT_MESSAGES",
    "HOME_PAGE",
    "LIST_COLLECTIONS",
    "PROJECTS",
    "SINGLETON_COLLECTIONS",
    "ContentCollection",
    "Document",
    "DocumentStore",
    "SingletonCollection",
]
