# kudos_wall/shared/utils/input_validation.py

import re
from typing import Optional, Tuple


class InputValidator:
    """
    Validation helpers complementing Pydantic field constraints.
    Each method returns a (valid, error_message) tuple.
    """

    MAX_NAME_LENGTH = 100
    MIN_PASSWORD_LENGTH = 8
    MAX_PASSWORD_LENGTH = 100
    # bcrypt ignores everything past the first 72 bytes
    MAX_PASSWORD_BYTES = 72
    MAX_EMAIL_LENGTH = 255

    # At least one lowercase, one uppercase, one digit and one non-alphanumeric character
    PASSWORD_PATTERN = re.compile(r'^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[^\da-zA-Z]).+$', re.DOTALL)

    @classmethod
    def validate_name(cls, name: str, max_length: int = MAX_NAME_LENGTH) -> Tuple[bool, Optional[str]]:
        if not name or not name.strip():
            return False, "Name is required"

        if len(name.strip()) > max_length:
            return False, f"Name must be at most {max_length} characters"

        return True, None

    @classmethod
    def validate_password(cls, password: str) -> Tuple[bool, Optional[str]]:
        if not password:
            return False, "Password is required"

        if len(password) < cls.MIN_PASSWORD_LENGTH:
            return False, f"Password must be at least {cls.MIN_PASSWORD_LENGTH} characters"

        if len(password) > cls.MAX_PASSWORD_LENGTH:
            return False, f"Password must be at most {cls.MAX_PASSWORD_LENGTH} characters"

        if len(password.encode("utf-8")) > cls.MAX_PASSWORD_BYTES:
            return False, f"Password must be at most {cls.MAX_PASSWORD_BYTES} bytes"

        if not cls.PASSWORD_PATTERN.match(password):
            return False, ("Password must contain at least one uppercase letter, one lowercase letter, "
                           "one number, and one special character")

        return True, None

    @classmethod
    def validate_email(cls, email: str) -> Tuple[bool, Optional[str]]:
        if not email:
            return False, "Email is required"

        if len(email) > cls.MAX_EMAIL_LENGTH:
            return False, f"Email must be at most {cls.MAX_EMAIL_LENGTH} characters"

        return True, None
