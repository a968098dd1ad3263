"""
Tests for bcrypt password hashing.
"""

from eventdesk.auth.passwords import dummy_password_hash, hash_password, verify_password


class TestPasswords:
    def test_hash_is_not_plaintext(self) -> None:
        hashed = hash_password("secret123", rounds=4)

        assert hashed != "secret123"
        assert hashed.startswith("$2")

    def test_verify_roundtrip(self) -> None:
        hashed = hash_password("secret123", rounds=4)

        assert verify_password("secret123", hashed) is True
        assert verify_password("secret124", hashed) is False

    def test_salted(self) -> None:
        assert hash_password("secret123", rounds=4) != hash_password("secret123", rounds=4)

    def test_malformed_hash_does_not_verify(self) -> None:
        assert verify_password("secret123", "not-a-bcrypt-hash") is False

    def test_dummy_hash_is_cached_and_rejects_everything(self) -> None:
        assert dummy_password_hash() is dummy_password_hash()
        assert verify_password("anything", dummy_password_hash()) is False
