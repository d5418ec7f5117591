# kudos_wall/domain/models/kudo_card_domain_model.py

from uuid import UUID
from enum import Enum
from dataclasses import dataclass
from typing import Optional
from datetime import datetime

from kudos_wall.domain.exceptions import InvalidInputException

MAX_MESSAGE_LENGTH = 500
MAX_RECIPIENT_NAME_LENGTH = 100


class KudoCardSort(str, Enum):
    RECENT = "recent"
    OLDEST = "oldest"


@dataclass
class KudoCard:
    """
    Domain model for a kudo card.

    The denormalized names (team, category, giver) are filled in by the
    repository when a card is read back; they are not part of a new card.
    """
    id: Optional[UUID]
    message: str
    recipient_name: str
    giver_id: UUID
    team_id: UUID
    category_id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    team_name: Optional[str] = None
    category_name: Optional[str] = None
    giver_email: Optional[str] = None
    giver_name: Optional[str] = None

    def __post_init__(self):
        self._validate_message(self.message)
        self._validate_recipient_name(self.recipient_name)

    @staticmethod
    def _validate_message(message: str) -> None:
        if not message or not message.strip():
            raise InvalidInputException("Message cannot be empty", fields={"message": "required"})
        if len(message) > MAX_MESSAGE_LENGTH:
            raise InvalidInputException(
                f"Message cannot exceed {MAX_MESSAGE_LENGTH} characters",
                fields={"message": "too long"},
            )

    @staticmethod
    def _validate_recipient_name(name: str) -> None:
        if not name or not name.strip():
            raise InvalidInputException("Recipient name cannot be empty", fields={"recipientName": "required"})
        if len(name) > MAX_RECIPIENT_NAME_LENGTH:
            raise InvalidInputException(
                f"Recipient name cannot exceed {MAX_RECIPIENT_NAME_LENGTH} characters",
                fields={"recipientName": "too long"},
            )


@dataclass
class KudoCardFilter:
    """Listing options; every field is optional."""
    recipient_name: Optional[str] = None
    team_id: Optional[UUID] = None
    category_id: Optional[UUID] = None
    search_term: Optional[str] = None
    sort_by: KudoCardSort = KudoCardSort.RECENT
