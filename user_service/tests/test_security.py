import bcrypt

from user_service.app.security import hash_password


def test_hash_is_salted():
    assert hash_password("secret123") != hash_password("secret123")

def test_hash_matches_only_its_password():
    password_hash = hash_password("secret123").encode()
    assert bcrypt.checkpw(b"secret123", password_hash)
    assert not bcrypt.checkpw(b"secret124", password_hash)

def test_long_passwords_are_accepted():
    password = "p" * 100
    assert bcrypt.checkpw(password.encode()[:72], hash_password(password).encode())
