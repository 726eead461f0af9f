"""Unit tests for password hashing."""

import bcrypt


class TestHashPassword:
    """Tests for hash_password."""

    def test_hash_verifies_with_bcrypt(self):
        from users.application.security import hash_password

        password_hash = hash_password("correct horse")

        assert password_hash.startswith("$2")
        assert bcrypt.checkpw(b"correct horse", password_hash.encode())
        assert not bcrypt.checkpw(b"wrong horse", password_hash.encode())

    def test_same_password_produces_different_hashes(self):
        """Hashing the same password twice should differ (salt)."""
        from users.application.security import hash_password

        assert hash_password("correct horse") != hash_password("correct horse")

    def test_handles_non_ascii_password(self):
        from users.application.security import hash_password

        password_hash = hash_password("pässwörd")

        assert bcrypt.checkpw("pässwörd".encode(), password_hash.encode())
