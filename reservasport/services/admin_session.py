"""Admin session manager issuing time-limited bearer tokens."""
import hmac
import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional
import pytz

from reservasport.core.clock import utc_now
from reservasport.core.config import settings
from reservasport.core.exceptions import InvalidInput, Unauthorized
from reservasport.models.snapshot import AdminToken, Snapshot

logger = logging.getLogger(__name__)

TOKEN_BYTES = 24


class AdminSessionManager:
    """Issues and validates admin tokens stored in the snapshot."""

    def __init__(self, password: Optional[str] = None, ttl: Optional[timedelta] = None):
        self._password = password
        self._ttl = ttl

    @property
    def password(self) -> str:
        return self._password if self._password is not None else settings.ADMIN_PASSWORD

    @property
    def ttl(self) -> timedelta:
        return self._ttl if self._ttl is not None else timedelta(hours=settings.TOKEN_TTL_HOURS)

    def login(
        self,
        snapshot: Snapshot,
        password: Optional[str],
        now: Optional[datetime] = None,
    ) -> str:
        """
        Issue a new token for the admin password.

        Expired tokens are purged from the snapshot at the same time.

        Raises:
            InvalidInput: If password is missing
            Unauthorized: If password is wrong
        """
        if not password:
            raise InvalidInput("Falta password.")
        if not hmac.compare_digest(password.encode("utf-8"), self.password.encode("utf-8")):
            logger.warning("Rejected admin login with wrong password")
            raise Unauthorized("Password incorrecto.")

        now = now or utc_now()
        self.purge_expired(snapshot, now)

        token = secrets.token_hex(TOKEN_BYTES)
        snapshot.admin_tokens[token] = AdminToken(created_at=now)
        logger.info("Issued admin token")
        return token

    def validate(
        self,
        snapshot: Snapshot,
        token: Optional[str],
        now: Optional[datetime] = None,
    ) -> None:
        """
        Check that a token exists and has not outlived the TTL.

        An expired token is deleted from the snapshot before the error
        is raised.

        Raises:
            Unauthorized: If the token is missing, unknown or expired
        """
        if not token:
            raise Unauthorized("No autorizado.")
        record = snapshot.admin_tokens.get(token)
        if record is None:
            raise Unauthorized("Token inválido o expirado.")
        if self._is_expired(record, now or utc_now()):
            del snapshot.admin_tokens[token]
            logger.warning("Rejected expired admin token")
            raise Unauthorized("Token expirado.")

    def logout(self, snapshot: Snapshot, token: str) -> None:
        """Revoke a token."""
        if snapshot.admin_tokens.pop(token, None) is not None:
            logger.info("Revoked admin token")

    def purge_expired(self, snapshot: Snapshot, now: Optional[datetime] = None) -> int:
        """Drop every expired token and return how many were removed."""
        now = now or utc_now()
        expired = [
            token
            for token, record in snapshot.admin_tokens.items()
            if self._is_expired(record, now)
        ]
        for token in expired:
            del snapshot.admin_tokens[token]
        if expired:
            logger.info(f"Purged {len(expired)} expired admin token(s)")
        return len(expired)

    def _is_expired(self, record: AdminToken, now: datetime) -> bool:
        created_at = record.created_at
        if created_at.tzinfo is None:
            created_at = pytz.UTC.localize(created_at)
        return now - created_at > self.ttl


# Singleton instance
admin_session = AdminSessionManager()
