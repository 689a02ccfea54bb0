"""SQLAlchemy implementation of UserRepository."""

from logging import getLogger

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from adapter.sql.models import UserRecord
from domain.model.errors import ConflictError, StoreError
from domain.model.user import User

logger = getLogger(__name__)


class SqlUserRepository:
    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    def _to_domain(self, record: UserRecord) -> User:
        """Convert a users row to the User domain model."""
        return User(
            id=record.id,
            handle=record.handle,
            email=record.email,
            password_hash=record.password_hash,
            created_at=record.created_at,
        )

    def create(self, handle: str, email: str, password_hash: str) -> User:
        """Insert a user and read back the generated id and created_at in the same statement."""
        stmt = (
            insert(UserRecord)
            .values(handle=handle, email=email, password_hash=password_hash)
            .returning(UserRecord.id, UserRecord.created_at)
        )
        with self.session_factory() as session:
            try:
                # session.begin() commits on exit and rolls back if the block raises
                with session.begin():
                    row = session.execute(stmt).one()
            except IntegrityError as e:
                logger.warning("User creation failed: handle or email already exists", extra={"handle": handle})
                raise ConflictError() from e
            except SQLAlchemyError as e:
                logger.error("Failed to create user", extra={"handle": handle, "error": type(e).__name__})
                raise StoreError() from e

        logger.info("User created", extra={"userId": row.id, "handle": handle})
        return User(
            id=row.id,
            handle=handle,
            email=email,
            password_hash=password_hash,
            created_at=row.created_at,
        )

    def get_by_handle(self, handle: str) -> User | None:
        """Find a user by handle. Return User or None if not found."""
        try:
            with self.session_factory() as session:
                record = session.execute(
                    select(UserRecord).where(UserRecord.handle == handle)
                ).scalar_one_or_none()
                return self._to_domain(record) if record else None
        except SQLAlchemyError as e:
            logger.error("Failed to get user by handle", extra={"handle": handle, "error": type(e).__name__})
            raise StoreError() from e

    def get_by_id(self, user_id: int) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        try:
            with self.session_factory() as session:
                record = session.get(UserRecord, user_id)
                return self._to_domain(record) if record else None
        except SQLAlchemyError as e:
            logger.error("Failed to get user by ID", extra={"userId": user_id, "error": type(e).__name__})
            raise StoreError() from e
