"""Tests for modules/auth/passwords.py."""

import pytest

from modules.auth.passwords import PasswordHasher, BCRYPT_MAX_BYTES


class TestPasswordHasher:
    @pytest.fixture
    def hasher(self):
        return PasswordHasher(rounds=4)

    def test_hash_is_not_plaintext(self, hasher):
        """Stored hash should never contain or equal the password."""
        hashed = hasher.hash("p@ss1234")
        assert hashed != "p@ss1234"
        assert "p@ss1234" not in hashed
        assert hashed.startswith("$2b$04$")

    def test_same_password_hashes_differently(self, hasher):
        """Each hash gets a fresh salt; both still verify."""
        first = hasher.hash("p@ss1234")
        second = hasher.hash("p@ss1234")
        assert first != second
        assert hasher.verify("p@ss1234", first)
        assert hasher.verify("p@ss1234", second)

    def test_wrong_password_fails(self, hasher):
        hashed = hasher.hash("p@ss1234")
        assert hasher.verify("p@ss12345", hashed) is False

    def test_default_rounds(self):
        """Cost factor defaults to 10."""
        assert PasswordHasher().rounds == 10

    def test_empty_password_rejected_on_hash(self, hasher):
        with pytest.raises(ValueError):
            hasher.hash("")

    @pytest.mark.parametrize("bad_hash", ["", "not-a-hash", "$2b$04$short", "plaintext"])
    def test_malformed_hash_returns_false(self, hasher, bad_hash):
        """A malformed stored hash should fail verification, not raise."""
        assert hasher.verify("p@ss1234", bad_hash) is False

    def test_empty_password_returns_false(self, hasher):
        hashed = hasher.hash("p@ss1234")
        assert hasher.verify("", hashed) is False

    def test_long_password_truncated_consistently(self, hasher):
        """Passwords longer than bcrypt's input limit hash and verify."""
        long_password = "x" * (BCRYPT_MAX_BYTES + 20)
        hashed = hasher.hash(long_password)
        assert hasher.verify(long_password, hashed)

    def test_unicode_password(self, hasher):
        hashed = hasher.hash("pässwörd-密码")
        assert hasher.verify("pässwörd-密码", hashed)
        assert not hasher.verify("passwort-密码", hashed)

    def test_burn_does_not_raise(self, hasher):
        hasher.burn("anything")
        hasher.burn("")
