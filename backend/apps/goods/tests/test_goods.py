from datetime import timedelta

from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.auth.tokens import JWTTokenIssuer
from apps.goods.models import Goods
from apps.users.models import User


class TestGoods(APITestCase):
    def setUp(self):
        self.user = User.objects.create(nickname="alice", email="alice@example.com", password="x")
        now = timezone.now()
        self.americano = Goods.objects.create(
            name="Americano", category="drink", price=4100, date=now - timedelta(hours=1)
        )
        self.bagel = Goods.objects.create(name="Bagel", category="food", price=3500, date=now)

    def _auth(self):
        token = JWTTokenIssuer().issue(self.user.id)
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

    def test_goods_require_authentication(self):
        res = self.client.get("/api/goods")
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_and_filter(self):
        self._auth()
        res = self.client.get("/api/goods")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([g["name"] for g in res.data["goods"]], ["Bagel", "Americano"])

        res = self.client.get("/api/goods", {"category": "drink"})
        self.assertEqual([g["goodsId"] for g in res.data["goods"]], [str(self.americano.id)])

    def test_detail(self):
        self._auth()
        res = self.client.get(f"/api/goods/{self.bagel.id}")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["goods"]["goodsId"], str(self.bagel.id))
        self.assertEqual(res.data["goods"]["price"], "3500.00")

    def test_unknown_or_malformed_detail_is_empty_404(self):
        self._auth()
        for goods_id in ("999999", "not-an-id"):
            res = self.client.get(f"/api/goods/{goods_id}")
            self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
            self.assertEqual(res.json(), {})
