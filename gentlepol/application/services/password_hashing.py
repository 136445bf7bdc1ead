"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from gentlepol.domain.users.exceptions import PasswordHashingError
from gentlepol.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted adaptive hashing (scrypt unless configured otherwise).

    ``check_password_hash`` compares digests with ``hmac.compare_digest``.
    """

    def __init__(self, method: str = "scrypt", max_bytes: int = 72) -> None:
        self._method = method
        self._max_bytes = max_bytes

    def hash(self, password: str) -> str:
        if len(password.encode("utf-8")) > self._max_bytes:
            raise PasswordHashingError()
        try:
            return str(generate_password_hash(password, method=self._method))
        except (ValueError, TypeError) as exc:
            raise PasswordHashingError() from exc

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError) as exc:
            raise PasswordHashingError() from exc
