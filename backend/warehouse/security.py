"""
Password hashing for stored user credentials.

Passwords are hashed with argon2 through passlib before they reach the
``users`` table.
"""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)
