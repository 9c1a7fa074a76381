"""User record storage for authentication."""

import logging
from typing import Any

from services.shared.database import Database, UniqueViolationError
from services.shared.exceptions import DuplicateUserError, InternalError, ValidationError

from .queries import CREATE_USERS_TABLE, GET_USER_BY_EMAIL, INSERT_USER

logger = logging.getLogger(__name__)


class UserService:
    """Credential store: email -> password hash records."""

    def __init__(self, database: Database):
        """Initialize the user service.

        Args:
            database: Database connection interface
        """
        if not database:
            raise ValueError("Database is required")
        self.db = database

    def ensure_schema(self) -> None:
        """Create the users table if it does not exist."""
        dialect = getattr(self.db, "dialect", "postgresql")
        with self.db.get_cursor() as cur:
            cur.execute(CREATE_USERS_TABLE[dialect])
        logger.info(f"Users table ready ({dialect})")

    def create_user(self, email: str, password_hash: str) -> dict[str, Any]:
        """Store a new user.

        The insert is the existence check: the UNIQUE constraint on email
        decides, so two concurrent registrations cannot both succeed.

        Args:
            email: Email address, stored exactly as given
            password_hash: Hash produced by PasswordHasher

        Returns:
            The created user record

        Raises:
            ValidationError: If email or password hash is empty
            DuplicateUserError: If the email is already registered
            InternalError: If the database did not return the new row
        """
        if not email:
            raise ValidationError("Email is required")
        if not password_hash:
            raise ValidationError("Password hash is required")

        try:
            with self.db.get_cursor() as cur:
                cur.execute(INSERT_USER, (email, password_hash))
                columns = [desc[0] for desc in cur.description]
                rows = cur.fetchall()
        except UniqueViolationError as e:
            logger.info(f"Registration rejected, email already exists: {email}")
            raise DuplicateUserError() from e

        if not rows:
            raise InternalError("Failed to create user")

        user = dict(zip(columns, rows[0]))
        logger.info(f"Created user: {email} (ID: {user['id']})")
        return user

    def get_user_by_email(self, email: str) -> dict[str, Any] | None:
        """Get user by email.

        Matching is exact and case-sensitive; no normalization is applied.

        Args:
            email: Email address to lookup

        Returns:
            User dictionary or None if not found
        """
        if not email:
            return None

        with self.db.get_cursor() as cur:
            cur.execute(GET_USER_BY_EMAIL, (email,))
            columns = [desc[0] for desc in cur.description]
            row = cur.fetchone()

            if not row:
                return None

            return dict(zip(columns, row))
