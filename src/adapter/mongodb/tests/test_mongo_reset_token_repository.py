"""Tests for MongoResetTokenRepository against a mocked collection."""

import unittest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from pymongo.errors import PyMongoError

from adapter.mongodb import RESET_TOKENS_COLLECTION_NAME
from adapter.mongodb.reset_token_repository import MongoResetTokenRepository
from domain.model.errors import RepositoryError
from domain.model.reset_token import ResetToken

CREATED = datetime(2026, 5, 1, 8, 0, tzinfo=timezone.utc)


class TestMongoResetTokenRepository(unittest.TestCase):

    def setUp(self):
        self.collection = MagicMock()
        self.db = MagicMock()
        self.db.__getitem__.return_value = self.collection
        self.repo = MongoResetTokenRepository(self.db)

    def test_uses_resettokens_collection(self):
        self.db.__getitem__.assert_called_with(RESET_TOKENS_COLLECTION_NAME)

    def test_create_writes_camel_case_document(self):
        self.repo.create(ResetToken(token='abc123', user_id='user-1', created_at=CREATED))

        self.collection.insert_one.assert_called_once_with({
            'userId': 'user-1', 'token': 'abc123', 'createdAt': CREATED,
        })

    def test_consume_is_a_single_find_and_delete(self):
        self.collection.find_one_and_delete.return_value = {
            '_id': 'oid', 'userId': 'user-1', 'token': 'abc123', 'createdAt': CREATED,
        }

        token = self.repo.consume('abc123')

        self.collection.find_one_and_delete.assert_called_once_with({'token': 'abc123'})
        self.collection.find_one.assert_not_called()
        self.assertEqual(token, ResetToken(token='abc123', user_id='user-1', created_at=CREATED))

    def test_consume_unknown_returns_none(self):
        self.collection.find_one_and_delete.return_value = None
        self.assertIsNone(self.repo.consume('nope'))

    def test_delete_reports_whether_removed(self):
        self.collection.delete_one.return_value = MagicMock(deleted_count=1)
        self.assertTrue(self.repo.delete('abc123'))

        self.collection.delete_one.return_value = MagicMock(deleted_count=0)
        self.assertFalse(self.repo.delete('abc123'))

    def test_count_for_user(self):
        self.collection.count_documents.return_value = 2
        self.assertEqual(self.repo.count_for_user('user-1'), 2)
        self.collection.count_documents.assert_called_once_with({'userId': 'user-1'})

    def test_store_errors_become_repository_errors(self):
        self.collection.insert_one.side_effect = PyMongoError('down')
        self.collection.find_one_and_delete.side_effect = PyMongoError('down')

        with self.assertRaises(RepositoryError):
            self.repo.create(ResetToken(token='abc', user_id='user-1', created_at=CREATED))
        with self.assertRaises(RepositoryError):
            self.repo.consume('abc')


if __name__ == '__main__':
    unittest.main()
