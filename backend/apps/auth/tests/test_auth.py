from unittest.mock import Mock, patch
from urllib.parse import urlencode

from rest_framework import status
from rest_framework.test import APITestCase

from apps.auth.tokens import JWTTokenIssuer
from apps.goods.views import GoodsListView
from apps.users.models import User


class TestAuthFlow(APITestCase):
    register_url = "/api/users"
    login_url = "/api/auth"
    me_url = "/api/users/me"

    def setUp(self):
        self.payload = {
            "nickname": "alice",
            "email": "alice@example.com",
            "password": "secret1",
            "confirmPassword": "secret1",
        }

    def _register(self, **overrides):
        return self.client.post(self.register_url, {**self.payload, **overrides}, format="json")

    def _login(self, email="alice@example.com", password="secret1"):
        return self.client.post(self.login_url, {"email": email, "password": password}, format="json")

    def test_register_login_and_fetch_profile(self):
        res = self._register()
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data, {})
        stored = User.objects.get(nickname="alice")
        self.assertNotEqual(stored.password, "secret1")

        login = self._login()
        self.assertEqual(login.status_code, status.HTTP_200_OK)
        token = login.data["token"]
        self.assertEqual(JWTTokenIssuer().read_user_id(token), str(stored.id))

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        me = self.client.get(self.me_url)
        self.assertEqual(me.status_code, status.HTTP_200_OK)
        self.assertEqual(
            me.data,
            {"user": {"userId": str(stored.id), "nickname": "alice", "email": "alice@example.com"}},
        )

    def test_register_accepts_form_encoded_body(self):
        res = self.client.post(
            self.register_url,
            urlencode(self.payload),
            content_type="application/x-www-form-urlencoded",
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

    def test_password_mismatch_creates_no_user(self):
        res = self._register(confirmPassword="other1")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("errorMessage", res.data)
        self.assertFalse(User.objects.exists())

    def test_duplicate_email_or_nickname_is_rejected(self):
        self.assertEqual(self._register().status_code, status.HTTP_201_CREATED)
        dup_nick = self._register(email="other@example.com")
        dup_mail = self._register(nickname="bob")
        self.assertEqual(dup_nick.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(dup_mail.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(User.objects.count(), 1)

    def test_wrong_password_and_unknown_email(self):
        self._register()
        wrong = self._login(password="wrong1")
        unknown = self._login(email="ghost@example.com")
        for res in (wrong, unknown):
            self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertNotIn("token", res.data)
            self.assertIn("errorMessage", res.data)

    def test_profile_requires_valid_token(self):
        res = self.client.get(self.me_url)
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertIn("errorMessage", res.data)

        self.client.credentials(HTTP_AUTHORIZATION="Bearer not.a.token")
        res = self.client.get(self.me_url)
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_token_with_altered_signature_is_rejected(self):
        self._register()
        header, payload, signature = self._login().data["token"].split(".")
        self.client.credentials(
            HTTP_AUTHORIZATION=f"Bearer {header}.{payload}.{signature[::-1]}"
        )
        res = self.client.get(self.me_url)
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertIn("errorMessage", res.data)

    def test_rejected_token_never_reaches_service(self):
        self._register()
        header, payload, signature = self._login().data["token"].split(".")
        self.client.credentials(
            HTTP_AUTHORIZATION=f"Bearer {header}.{payload}.{signature[::-1]}"
        )
        service = Mock()
        with patch.object(GoodsListView, "service", service):
            res = self.client.get("/api/goods")
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        service.list_goods.assert_not_called()

    def test_padded_nickname_or_password_is_rejected(self):
        for overrides in (
            {"nickname": "  alice "},
            {"password": " abcd ", "confirmPassword": " abcd "},
        ):
            res = self._register(**overrides)
            self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST, overrides)
            self.assertIn("details", res.data)
        self.assertFalse(User.objects.exists())

    def test_padded_login_password_is_rejected(self):
        self._register()
        res = self._login(password=" secret1 ")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertNotIn("token", res.data)

    def test_token_for_deleted_user_is_rejected(self):
        self._register()
        token = self._login().data["token"]
        User.objects.all().delete()
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        res = self.client.get(self.me_url)
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_messages_use_requested_language(self):
        res = self.client.post(
            self.register_url,
            {**self.payload, "confirmPassword": "other1"},
            format="json",
            HTTP_ACCEPT_LANGUAGE="en",
        )
        self.assertEqual(
            res.data["errorMessage"],
            "The password does not match the password confirmation.",
        )
