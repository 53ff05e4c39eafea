import unittest
from unittest import mock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from apps.common.repository import DuplicateRecordError
from apps.users.repositories import MongoUserRepository, UserRepository


@pytest.mark.django_db
class TestUserRepository:
    def setup_method(self):
        self.repo = UserRepository()

    def test_create_and_lookup(self):
        created = self.repo.create_user(nickname="alice", email="a@example.com", password="hash")
        assert created.id.isdigit()
        assert self.repo.get_by_id(created.id).nickname == "alice"
        assert self.repo.get_by_email("a@example.com").id == created.id
        assert self.repo.get_by_email("missing@example.com") is None

    def test_get_by_id_tolerates_malformed_ids(self):
        assert self.repo.get_by_id("abc") is None
        assert self.repo.get_by_id("-1") is None

    def test_find_by_email_or_nickname_matches_either(self):
        self.repo.create_user(nickname="alice", email="a@example.com", password="hash")
        assert len(self.repo.find_by_email_or_nickname("other@example.com", "alice")) == 1
        assert len(self.repo.find_by_email_or_nickname("a@example.com", "bob")) == 1
        assert self.repo.find_by_email_or_nickname("b@example.com", "bob") == []

    def test_duplicate_nickname_raises_duplicate_record_error(self):
        self.repo.create_user(nickname="alice", email="a@example.com", password="hash")
        with pytest.raises(DuplicateRecordError):
            self.repo.create_user(nickname="alice", email="b@example.com", password="hash")


class MongoUserRepositoryTests(unittest.TestCase):
    def setUp(self):
        self.collection = mock.Mock()
        store = mock.Mock()
        store.collection.return_value = self.collection
        self.repo = MongoUserRepository(store)
        store.collection.assert_called_once_with("users")

    def test_get_by_id_parses_object_id(self):
        oid = ObjectId()
        self.collection.find_one.return_value = {
            "_id": oid,
            "nickname": "alice",
            "email": "a@example.com",
            "password": "hash",
        }
        record = self.repo.get_by_id(str(oid))
        self.collection.find_one.assert_called_once_with({"_id": oid})
        self.assertEqual(record.id, str(oid))

    def test_get_by_id_skips_query_for_malformed_id(self):
        self.assertIsNone(self.repo.get_by_id("not-an-object-id"))
        self.collection.find_one.assert_not_called()

    def test_find_by_email_or_nickname_uses_or_query(self):
        self.collection.find.return_value = []
        self.repo.find_by_email_or_nickname("a@example.com", "alice")
        self.collection.find.assert_called_once_with(
            {"$or": [{"email": "a@example.com"}, {"nickname": "alice"}]}
        )

    def test_create_user_returns_record_with_inserted_id(self):
        oid = ObjectId()
        self.collection.insert_one.return_value = mock.Mock(inserted_id=oid)
        record = self.repo.create_user(nickname="alice", email="a@example.com", password="hash")
        self.assertEqual(record.id, str(oid))
        self.assertEqual(record.password, "hash")

    def test_duplicate_key_is_translated(self):
        self.collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")
        with self.assertRaises(DuplicateRecordError):
            self.repo.create_user(nickname="alice", email="a@example.com", password="hash")
