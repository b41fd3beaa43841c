from typing import Protocol


class PasswordHasherPort(Protocol):
    def hash_password(self, password: str) -> str: ...

    def verify_password(self, plain: str, hashed: str) -> bool:
        # False for a mismatch or an unrecognised hash
        ...
