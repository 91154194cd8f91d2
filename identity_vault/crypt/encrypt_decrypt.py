from typing import Optional

import bcrypt

from identity_vault.database.config.config import get_settings


class EncryptionDec:
    """
    Utility class for password hashing and verification.

    Methods
    -------
    hash_password(text: str) -> str
        Hashes a plaintext password using bcrypt with a generated salt.
    check_passwords(plain_text: str, passwd: str) -> bool
        Verifies a plaintext password against a hashed password.
    """

    def __init__(self, rounds: Optional[int] = None):
        """
        Initialize the EncryptionDec utility.

        Parameters
        ----------
        rounds : int, optional
            bcrypt cost factor. Defaults to the process-wide
            `get_settings().BCRYPT_ROUNDS`, read at hashing time; settings
            passed to `create_app` do not change it.
        """
        self.rounds = rounds

    def hash_password(self, text: str) -> str:
        """
        Hash a plaintext password using bcrypt.

        Parameters
        ----------
        text : str
            The plaintext password.

        Returns
        -------
        str
            The bcrypt-hashed password (UTF-8 decoded).
        """
        rounds = self.rounds or get_settings().BCRYPT_ROUNDS
        salt = bcrypt.gensalt(rounds=rounds)
        hashed = bcrypt.hashpw(text.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def check_passwords(self, plain_text: str, passwd: Optional[str]) -> bool:
        """
        Verify if a plaintext password matches a hashed password.

        Parameters
        ----------
        plain_text : str
            The plaintext password to check.
        passwd : str | None
            The previously hashed password to verify against.

        Returns
        -------
        bool
            True if the password matches, False otherwise (including when no
            hash is stored or the stored value is not a bcrypt hash).
        """
        if not passwd:
            return False
        try:
            return bcrypt.checkpw(plain_text.encode("utf-8"), passwd.encode("utf-8"))
        except ValueError:
            return False
