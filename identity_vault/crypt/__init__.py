"""
The `crypt` package provides the password utilities behind registration
and login.

Contents
--------
- encrypt_decrypt
    Utility module exposing the `EncryptionDec` class:
        * `hash_password` — salted bcrypt hash of a plaintext password
        * `check_passwords` — verifies a plaintext password against a stored hash
"""
