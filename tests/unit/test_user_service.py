"""Unit tests for UserService."""

import threading

import pytest

from services.auth.queries import CREATE_USERS_TABLE, GET_USER_BY_EMAIL, INSERT_USER
from services.auth.user_service import UserService
from services.shared.database import UniqueViolationError
from services.shared.exceptions import DuplicateUserError, InternalError, ValidationError

USER_COLUMNS = [("id",), ("email",), ("password_hash",), ("created_at",)]


@pytest.fixture
def user_service(mock_database):
    """Create a UserService instance with mocked database."""
    return UserService(database=mock_database)


class TestUserService:
    """Test cases for UserService against a mocked database."""

    def test_init_requires_database(self):
        """Test that UserService requires a database."""
        with pytest.raises(ValueError, match="Database is required"):
            UserService(database=None)

    def test_ensure_schema_uses_dialect(self, user_service, mock_cursor):
        user_service.ensure_schema()

        mock_cursor.execute.assert_called_once_with(CREATE_USERS_TABLE["postgresql"])

    def test_create_user_validation_empty_email(self, user_service):
        with pytest.raises(ValidationError, match="Email is required"):
            user_service.create_user(email="", password_hash="salt:key")

    def test_create_user_validation_empty_hash(self, user_service):
        with pytest.raises(ValidationError, match="Password hash is required"):
            user_service.create_user(email="test@example.com", password_hash="")

    def test_create_user_success(self, user_service, mock_cursor):
        mock_cursor.description = USER_COLUMNS
        mock_cursor.fetchall.return_value = [(1, "test@example.com", "salt:key", "2024-01-01")]

        user = user_service.create_user(email="test@example.com", password_hash="salt:key")

        assert user == {
            "id": 1,
            "email": "test@example.com",
            "password_hash": "salt:key",
            "created_at": "2024-01-01",
        }
        mock_cursor.execute.assert_called_once_with(INSERT_USER, ("test@example.com", "salt:key"))

    def test_create_user_does_not_pre_check(self, user_service, mock_cursor):
        """Only the INSERT runs; uniqueness is left to the constraint."""
        mock_cursor.description = USER_COLUMNS
        mock_cursor.fetchall.return_value = [(1, "test@example.com", "salt:key", None)]

        user_service.create_user(email="test@example.com", password_hash="salt:key")

        assert mock_cursor.execute.call_count == 1

    def test_create_user_unique_violation(self, user_service, mock_cursor):
        mock_cursor.execute.side_effect = UniqueViolationError("duplicate key")

        with pytest.raises(DuplicateUserError):
            user_service.create_user(email="test@example.com", password_hash="salt:key")

    def test_create_user_no_row_returned(self, user_service, mock_cursor):
        mock_cursor.description = USER_COLUMNS
        mock_cursor.fetchall.return_value = []

        with pytest.raises(InternalError, match="Failed to create user"):
            user_service.create_user(email="test@example.com", password_hash="salt:key")

    def test_get_user_by_email_found(self, user_service, mock_cursor):
        mock_cursor.description = USER_COLUMNS
        mock_cursor.fetchone.return_value = (1, "Test@Example.com", "salt:key", None)

        user = user_service.get_user_by_email("Test@Example.com")

        assert user["id"] == 1
        # Email is passed through untouched
        mock_cursor.execute.assert_called_once_with(GET_USER_BY_EMAIL, ("Test@Example.com",))

    def test_get_user_by_email_not_found(self, user_service, mock_cursor):
        mock_cursor.description = USER_COLUMNS
        mock_cursor.fetchone.return_value = None

        assert user_service.get_user_by_email("missing@example.com") is None

    def test_get_user_by_email_empty(self, user_service, mock_database):
        assert user_service.get_user_by_email("") is None
        mock_database.get_cursor.assert_not_called()


class TestUserServiceSQLite:
    """UserService against a real SQLite file, exercising the UNIQUE constraint."""

    @pytest.fixture
    def sqlite_user_service(self, sqlite_database):
        service = UserService(database=sqlite_database)
        service.ensure_schema()
        return service

    def test_create_and_lookup(self, sqlite_user_service):
        created = sqlite_user_service.create_user("test@example.com", "salt:key")

        found = sqlite_user_service.get_user_by_email("test@example.com")

        assert found["id"] == created["id"]
        assert found["password_hash"] == "salt:key"
        assert found["created_at"] is not None

    def test_ensure_schema_is_repeatable(self, sqlite_user_service):
        sqlite_user_service.ensure_schema()

    def test_duplicate_email_rejected(self, sqlite_user_service):
        sqlite_user_service.create_user("test@example.com", "salt:key")

        with pytest.raises(DuplicateUserError):
            sqlite_user_service.create_user("test@example.com", "other:key")

    def test_lookup_is_case_sensitive(self, sqlite_user_service):
        sqlite_user_service.create_user("Test@Example.com", "salt:key")

        assert sqlite_user_service.get_user_by_email("test@example.com") is None
        # Different case is a different account
        sqlite_user_service.create_user("test@example.com", "salt:key")

    def test_concurrent_registration_creates_one_row(self, sqlite_user_service, sqlite_database):
        """Interleaved registrations of one email leave exactly one row."""
        workers = 8
        barrier = threading.Barrier(workers)
        outcomes = []
        lock = threading.Lock()

        def register():
            barrier.wait()
            try:
                sqlite_user_service.create_user("race@example.com", "salt:key")
                result = "created"
            except DuplicateUserError:
                result = "duplicate"
            with lock:
                outcomes.append(result)

        threads = [threading.Thread(target=register) for _ in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(outcomes) == ["created"] + ["duplicate"] * (workers - 1)
        with sqlite_database.get_cursor() as cur:
            cur.execute("SELECT COUNT(*) FROM users WHERE email = %s", ("race@example.com",))
            assert cur.fetchone()[0] == 1
