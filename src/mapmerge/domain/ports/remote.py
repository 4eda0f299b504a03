"""Port for reading the other map during a merge or diff."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from mapmerge.domain.model import Edge, Node


@runtime_checkable
class RemoteGraphSource(Protocol):
    """A remote map with an explicit open/ready/close lifecycle.

    ``wait_until_ready`` blocks until the source has a causally complete
    snapshot. ``get_nodes``/``get_edges`` then return that snapshot in full.
    """

    def open(self) -> None: ...

    def wait_until_ready(self, timeout: float | None = None) -> None: ...

    def get_nodes(self) -> Sequence[Node]: ...

    def get_edges(self) -> Sequence[Edge]: ...

    def close(self) -> None: ...

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None: ...


class RemoteSourceError(RuntimeError):
    """Raised when a remote map cannot be read."""


class RemoteSourceNotReadyError(RemoteSourceError):
    """Raised when the snapshot is requested before the source is ready."""


class RemoteSourceTimeoutError(RemoteSourceError):
    """Raised when the source does not synchronise within the allowed time."""
