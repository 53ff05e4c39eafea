from django.contrib.auth.hashers import check_password, make_password


class DjangoPasswordHasher:
    """Salted password hashing through Django's configured PASSWORD_HASHERS."""

    def hash(self, raw_password: str) -> str:
        return make_password(raw_password)

    def verify(self, raw_password: str, encoded: str) -> bool:
        if not encoded:
            return False
        return check_password(raw_password, encoded)
