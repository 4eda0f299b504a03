"""Identifier generation for cloned factors and links."""

from __future__ import annotations

from collections.abc import Callable
from uuid import uuid4

type IdentifierGenerator = Callable[[], str]


def new_id() -> str:
    return str(uuid4())
