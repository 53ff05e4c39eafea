import unittest

from rest_framework.exceptions import AuthenticationFailed
from rest_framework.test import APIRequestFactory
from rest_framework_simplejwt.exceptions import InvalidToken

from apps.auth.authentication import AuthenticatedUser, BearerTokenAuthentication
from apps.auth.tokens import JWTTokenIssuer
from .fakes import FakeUserRepository

factory = APIRequestFactory()


def _request(header=None):
    extra = {"HTTP_AUTHORIZATION": header} if header is not None else {}
    return factory.get("/api/users/me", **extra)


class BearerTokenAuthenticationTests(unittest.TestCase):
    def setUp(self):
        self.repo = FakeUserRepository()
        self.user = self.repo.add("alice", "alice@example.com", "hashed:secret1")
        self.auth = BearerTokenAuthentication(users=self.repo)
        self.issuer = JWTTokenIssuer()

    def test_valid_token_resolves_user_without_password(self):
        token = self.issuer.issue(self.user.id)
        user, validated = self.auth.authenticate(_request(f"Bearer {token}"))
        self.assertIsInstance(user, AuthenticatedUser)
        self.assertTrue(user.is_authenticated)
        self.assertEqual(user.id, self.user.id)
        self.assertEqual(user.nickname, "alice")
        self.assertFalse(hasattr(user.profile, "password"))
        self.assertEqual(validated["userId"], self.user.id)

    def test_missing_header_leaves_request_anonymous(self):
        self.assertIsNone(self.auth.authenticate(_request()))

    def test_other_scheme_is_ignored(self):
        self.assertIsNone(self.auth.authenticate(_request("Basic abc")))

    def test_tampered_token_is_rejected(self):
        header, payload, signature = self.issuer.issue(self.user.id).split(".")
        tampered = ".".join([header, payload, signature[::-1]])
        with self.assertRaises(InvalidToken):
            self.auth.authenticate(_request(f"Bearer {tampered}"))

    def test_garbage_token_is_rejected(self):
        with self.assertRaises(InvalidToken):
            self.auth.authenticate(_request("Bearer not-a-token"))

    def test_unknown_user_is_rejected(self):
        token = self.issuer.issue("999")
        with self.assertRaises(AuthenticationFailed):
            self.auth.authenticate(_request(f"Bearer {token}"))

    def test_issued_token_round_trips_user_id(self):
        token = self.issuer.issue(self.user.id)
        self.assertEqual(self.issuer.read_user_id(token), self.user.id)
