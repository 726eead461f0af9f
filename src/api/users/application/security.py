"""Password hashing for user accounts.

Uses bcrypt with a per-hash salt; plaintext passwords are never stored.
"""

import bcrypt


def hash_password(password: str) -> str:
    """Hash a password using bcrypt.

    The work factor is determined by bcrypt's gensalt().

    Args:
        password: The plaintext password

    Returns:
        The bcrypt hash as a string
    """
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()
