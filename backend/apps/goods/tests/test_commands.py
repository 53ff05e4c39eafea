from io import StringIO

import pytest
from django.core.management import call_command

from apps.goods.management.commands.seed_goods import GOODS
from apps.goods.models import Goods
from apps.goods.repositories import GoodsRepository


@pytest.mark.django_db
def test_seed_goods_inserts_catalog_newest_first():
    out = StringIO()
    call_command("seed_goods", stdout=out)
    assert Goods.objects.count() == len(GOODS)
    names = [g.name for g in GoodsRepository().list_goods()]
    assert names == [name for name, *_ in GOODS]
    assert f"Seeded {len(GOODS)} goods" in out.getvalue()


@pytest.mark.django_db
def test_seed_goods_clear_replaces_existing_rows():
    call_command("seed_goods", stdout=StringIO())
    call_command("seed_goods", "--clear", stdout=StringIO())
    assert Goods.objects.count() == len(GOODS)
