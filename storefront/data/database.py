# storefront/data/database.py
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.domain.errors import StorageError
from storefront.utils.logging import get_logger
from storefront.utils.retry import db_retry

logger = get_logger(__name__)

Base = declarative_base()


class Database:
    """
    Uchwyt do bazy przekazywany jawnie (create_app(database=...)),
    zamiast globalnego SessionLocal. Testy podstawiaja sqlite w pamieci.
    """

    def __init__(self, url: str, **engine_kwargs):
        if url.startswith("sqlite"):
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
            if url in ("sqlite://", "sqlite:///:memory:"):
                #jedno polaczenie wspoldzielone miedzy watkami threadpoola
                engine_kwargs.setdefault("poolclass", StaticPool)
        else:
            engine_kwargs.setdefault("pool_pre_ping", True)

        self.url = url
        self.engine = create_engine(url, **engine_kwargs)
        self.session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )

    @db_retry()
    def create_all(self) -> None:
        # modele musza byc zaimportowane zeby trafily do Base.metadata
        import storefront.data.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info(f"Database tables ready: {sorted(Base.metadata.tables.keys())}")

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Sesja do odczytow, bez jawnej transakcji."""
        session = self.session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Database error: {e}", exc_info=True)
            raise StorageError("Database operation failed") from e
        finally:
            session.close()

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        BEGIN ... COMMIT na dedykowanej sesji.

        Commit przy normalnym wyjsciu, rollback przy kazdym wyjatku,
        polaczenie zawsze wraca do puli. Bledy SQLAlchemy sa zamieniane
        na StorageError, pozostale wyjatki (np. EmptyCart) leca dalej bez zmian.
        """
        session = self.session_factory()
        try:
            with session.begin():
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Transaction rolled back: {e}", exc_info=True)
            raise StorageError("Database transaction failed") from e
        finally:
            session.close()
