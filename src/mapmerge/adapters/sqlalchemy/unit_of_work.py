"""Process-wide engine and the unit of work wrapping one local-map session."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from mapmerge.common.storage import get_database_uri

from .mappings import create_all_tables
from .repositories import SqlAlchemyGraphStore

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine


class StartupError(RuntimeError):
    """The adapter was used before ``startup()`` or configured twice."""


class _Database:
    """Engine plus session factory, replaced together by ``startup(force=True)``."""

    def __init__(self) -> None:
        self.engine: Engine | None = None
        self.sessions: sessionmaker[Session] | None = None

    def bind(self, engine: Engine | None) -> None:
        self.engine = engine
        self.sessions = None if engine is None else sessionmaker(engine, expire_on_commit=False)

    def require_sessions(self) -> sessionmaker[Session]:
        if self.sessions is None:
            raise StartupError(
                "Local map database not initialised; call "
                "mapmerge.adapters.sqlalchemy.startup() first."
            )
        return self.sessions


_DATABASE = _Database()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Bind the adapter to ``engine`` (or a new one) and create missing tables."""

    if _DATABASE.engine is not None and not force:
        raise StartupError("Local map database already initialised; pass force=True to rebind.")
    if engine is None:
        engine = create_engine(database_uri or get_database_uri())
    create_all_tables(engine)
    _DATABASE.bind(engine)


def configured_engine() -> Engine | None:
    return _DATABASE.engine


def is_started() -> bool:
    return _DATABASE.engine is not None


def shutdown() -> None:
    """Dispose the engine and forget it; ``startup()`` may be called again."""

    if _DATABASE.engine is not None:
        _DATABASE.engine.dispose()
    _DATABASE.bind(None)


class SqlAlchemyGraphUnitOfWork:
    """One session over the ``factor`` and ``link`` tables.

    Nothing is committed implicitly. Leaving the block with an exception rolls
    the session back, so a merge that fails part-way adds nothing.
    """

    def __init__(self) -> None:
        self._sessions = _DATABASE.require_sessions()
        self._session: Session | None = None
        self._graph: SqlAlchemyGraphStore | None = None

    def __enter__(self) -> SqlAlchemyGraphUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work is already open")
        self._session = self._sessions()
        self._graph = SqlAlchemyGraphStore(self._session)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        try:
            if exc_type is not None:
                session.rollback()
        finally:
            session.close()
            self._session = None
            self._graph = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work is not open")
        return self._session

    @property
    def graph(self) -> SqlAlchemyGraphStore:
        if self._graph is None:
            raise StartupError("Unit of work is not open")
        return self._graph

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
