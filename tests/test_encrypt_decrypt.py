"""Unit tests for password hashing."""

from identity_vault.crypt.encrypt_decrypt import EncryptionDec


class TestEncryptionDec:

    def test_hash_is_not_plaintext(self):
        enc = EncryptionDec(rounds=4)
        hashed = enc.hash_password(text="pw")

        assert hashed != "pw"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self):
        enc = EncryptionDec(rounds=4)

        assert enc.hash_password(text="pw") != enc.hash_password(text="pw")

    def test_check_passwords(self):
        enc = EncryptionDec(rounds=4)
        hashed = enc.hash_password(text="pw")

        assert enc.check_passwords("pw", hashed) is True
        assert enc.check_passwords("wrong", hashed) is False

    def test_rounds_default_to_settings(self):
        hashed = EncryptionDec().hash_password(text="pw")

        assert hashed.split("$")[2] == "04"

    def test_missing_or_malformed_hash_never_matches(self):
        enc = EncryptionDec(rounds=4)

        assert enc.check_passwords("pw", None) is False
        assert enc.check_passwords("pw", "") is False
        assert enc.check_passwords("pw", "pw") is False
