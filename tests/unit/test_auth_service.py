"""Unit tests for AuthService."""

from unittest.mock import Mock

import pytest

from services.auth.auth_service import AuthService
from services.auth.session_registry import InMemorySessionStore, SessionRegistry
from services.auth.user_service import UserService
from services.shared.exceptions import (
    DuplicateUserError,
    InvalidCredentialsError,
    ValidationError,
)


@pytest.fixture
def mock_user_service():
    """Create a mock UserService."""
    return Mock(spec=UserService)


@pytest.fixture
def session_registry():
    return SessionRegistry(store=InMemorySessionStore())


@pytest.fixture
def auth_service(mock_user_service, session_registry, fast_hasher):
    """Create an AuthService instance with mocked user storage."""
    return AuthService(
        user_service=mock_user_service,
        session_registry=session_registry,
        password_hasher=fast_hasher,
    )


@pytest.fixture
def stored_user(fast_hasher):
    return {
        "id": 1,
        "email": "test@example.com",
        "password_hash": fast_hasher.hash("password123"),
        "created_at": "2024-01-01",
    }


class TestAuthService:
    """Test cases for AuthService."""

    def test_init_requires_user_service(self, session_registry):
        with pytest.raises(ValueError, match="UserService is required"):
            AuthService(user_service=None, session_registry=session_registry)

    def test_init_requires_session_registry(self, mock_user_service):
        with pytest.raises(ValueError, match="SessionRegistry is required"):
            AuthService(user_service=mock_user_service, session_registry=None)

    def test_register_user_hashes_password(self, auth_service, mock_user_service, fast_hasher):
        mock_user_service.create_user.side_effect = lambda email, password_hash: {
            "id": 7,
            "email": email,
            "password_hash": password_hash,
            "created_at": None,
        }

        user = auth_service.register_user("new@example.com", "password123")

        assert user == {"id": 7, "email": "new@example.com", "created_at": None}
        email, password_hash = mock_user_service.create_user.call_args.args
        assert email == "new@example.com"
        assert password_hash != "password123"
        assert fast_hasher.verify("password123", password_hash)

    @pytest.mark.parametrize("email,password", [("", "password123"), ("a@b.com", ""), ("", "")])
    def test_register_user_requires_fields(self, auth_service, mock_user_service, email, password):
        with pytest.raises(ValidationError):
            auth_service.register_user(email, password)
        mock_user_service.create_user.assert_not_called()

    def test_register_user_duplicate_propagates(self, auth_service, mock_user_service):
        mock_user_service.create_user.side_effect = DuplicateUserError()

        with pytest.raises(DuplicateUserError):
            auth_service.register_user("test@example.com", "password123")

    def test_login_user_success(self, auth_service, mock_user_service, stored_user, session_registry):
        mock_user_service.get_user_by_email.return_value = stored_user

        token, user = auth_service.login_user("test@example.com", "password123")

        assert session_registry.resolve(token) == "test@example.com"
        assert "password_hash" not in user
        mock_user_service.get_user_by_email.assert_called_once_with("test@example.com")

    def test_login_unknown_email_and_wrong_password_look_the_same(
        self, auth_service, mock_user_service, stored_user
    ):
        mock_user_service.get_user_by_email.return_value = None
        with pytest.raises(InvalidCredentialsError) as unknown:
            auth_service.login_user("nobody@example.com", "password123")

        mock_user_service.get_user_by_email.return_value = stored_user
        with pytest.raises(InvalidCredentialsError) as wrong:
            auth_service.login_user("test@example.com", "wrongpassword")

        assert unknown.value.message == wrong.value.message
        assert unknown.value.status_code == wrong.value.status_code == 401

    def test_login_user_empty_credentials(self, auth_service, mock_user_service):
        with pytest.raises(ValidationError):
            auth_service.login_user("", "password")
        with pytest.raises(ValidationError):
            auth_service.login_user("test@example.com", "")
        mock_user_service.get_user_by_email.assert_not_called()

    def test_login_with_malformed_stored_hash(self, auth_service, mock_user_service, stored_user):
        mock_user_service.get_user_by_email.return_value = {**stored_user, "password_hash": "garbage"}

        with pytest.raises(InvalidCredentialsError):
            auth_service.login_user("test@example.com", "password123")

    def test_logout_user(self, auth_service, mock_user_service, stored_user):
        mock_user_service.get_user_by_email.return_value = stored_user
        token, _ = auth_service.login_user("test@example.com", "password123")

        auth_service.logout_user(token)

        assert auth_service.current_user(token) is None

    def test_logout_user_is_idempotent(self, auth_service):
        auth_service.logout_user(None)
        auth_service.logout_user("unknown-token")
        auth_service.logout_user("unknown-token")

    @pytest.mark.parametrize(
        "email,password",
        [("a@b.com", 12345), (["a@b.com"], "password123"), ({"e": 1}, ["pw"])],
    )
    def test_non_string_credentials_rejected(self, auth_service, mock_user_service, email, password):
        with pytest.raises(ValidationError, match="must be strings"):
            auth_service.register_user(email, password)
        with pytest.raises(ValidationError, match="must be strings"):
            auth_service.login_user(email, password)
        mock_user_service.create_user.assert_not_called()
        mock_user_service.get_user_by_email.assert_not_called()

    def test_unknown_email_still_runs_password_check(
        self, mock_user_service, session_registry, fast_hasher
    ):
        hasher = Mock(wraps=fast_hasher)
        service = AuthService(
            user_service=mock_user_service,
            session_registry=session_registry,
            password_hasher=hasher,
        )
        mock_user_service.get_user_by_email.return_value = None

        with pytest.raises(InvalidCredentialsError):
            service.login_user("nobody@example.com", "password123")

        hasher.verify.assert_called_once()
        assert hasher.verify.call_args.args[0] == "password123"
