# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .models import AccountRow, DocumentRow
from .session import Base, Database, build_engine

__all__ = ["AccountRow", "Base", "Database", "DocumentRow", "build_engine"]
