"""Salted scrypt password hashing."""

import hashlib
import hmac
import logging
import secrets

logger = logging.getLogger(__name__)

SALT_BYTES = 16
KEY_LENGTH = 64


class PasswordHasher:
    """Hash and verify passwords stored as ``salt:hex(derived_key)``.

    The salt is kept as a hex string and fed to scrypt as its UTF-8 bytes,
    so stored values stay plain ASCII.
    """

    def __init__(self, n: int = 16384, r: int = 8, p: int = 1):
        """Initialize the hasher.

        Args:
            n: scrypt CPU/memory cost (power of two)
            r: scrypt block size
            p: scrypt parallelization
        """
        self.n = n
        self.r = r
        self.p = p

    def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt.

        Args:
            password: Plain text password

        Returns:
            Stored hash in ``salt:hexkey`` form

        Raises:
            TypeError: If password is not a string
        """
        if not isinstance(password, str):
            raise TypeError("Password must be a string")
        salt = secrets.token_hex(SALT_BYTES)
        return f"{salt}:{self._derive(password, salt).hex()}"

    def verify(self, password: str, stored_hash: str) -> bool:
        """Verify a password against a stored hash.

        Never raises: empty input or a malformed stored value verifies as
        False.

        Args:
            password: Plain text password
            stored_hash: Value previously returned by ``hash``

        Returns:
            True if password matches, False otherwise
        """
        if not isinstance(password, str) or not isinstance(stored_hash, str):
            return False
        if not password or not stored_hash:
            return False

        salt, sep, key_hex = stored_hash.partition(":")
        if not sep or not salt or not key_hex:
            return False

        try:
            stored_key = bytes.fromhex(key_hex)
            derived_key = self._derive(password, salt)
        except (ValueError, TypeError) as e:
            logger.error(f"Error verifying password: {e}")
            return False

        if len(stored_key) != len(derived_key):
            return False
        return hmac.compare_digest(stored_key, derived_key)

    def _derive(self, password: str, salt: str) -> bytes:
        return hashlib.scrypt(
            password.encode("utf-8"),
            salt=salt.encode("utf-8"),
            n=self.n,
            r=self.r,
            p=self.p,
            dklen=KEY_LENGTH,
        )
