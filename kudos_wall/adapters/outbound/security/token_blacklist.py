# kudos_wall/adapters/outbound/security/token_blacklist.py

"""
In-memory token blacklist.

Revoked tokens are stored by SHA-256 digest, never in raw form. The store
is process-local and not durable: a restart forgets every revocation and a
multi-instance deployment needs a shared implementation of ITokenBlacklist.
"""

import hashlib
import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict

from kudos_wall.application.ports.outbound import ITokenBlacklist
from kudos_wall.adapters.outbound.security.auth_user_manager import utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlacklistEntry:
    token_hash: str
    subject_id: str
    created_at: datetime
    expires_at: datetime


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


class InMemoryTokenBlacklist(ITokenBlacklist):
    """
    Dict-backed blacklist.

    Mutations hold a lock so workers sharing the instance across threads
    never observe a half-applied prune. Each entry is immutable and stored
    with a single assignment.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self._entries: Dict[str, BlacklistEntry] = {}
        self._lock = threading.Lock()
        self._clock = clock

    async def add(self, token: str, subject_id: str, expires_at: datetime) -> BlacklistEntry:
        entry = BlacklistEntry(
            token_hash=hash_token(token),
            subject_id=str(subject_id),
            created_at=self._clock(),
            expires_at=expires_at,
        )
        with self._lock:
            self._entries[entry.token_hash] = entry
        logger.info(f"Token revoked for subject {entry.subject_id} until {expires_at.isoformat()}")
        return entry

    async def is_revoked(self, token: str) -> bool:
        return hash_token(token) in self._entries

    async def prune_expired(self) -> None:
        now = self._clock()
        with self._lock:
            expired = [key for key, entry in self._entries.items() if entry.expires_at < now]
            for key in expired:
                del self._entries[key]
        logger.debug(f"Removed {len(expired)} expired tokens from blacklist")

    def __len__(self) -> int:
        return len(self._entries)
