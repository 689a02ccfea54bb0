"""Unit tests for FakeUserRepository, checking Port contract compliance."""

import unittest

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import ConflictError
from domain.model.user import User


class TestFakeUserRepository(unittest.TestCase):
    """Tests that FakeUserRepository behaves like UserRepository."""

    def setUp(self):
        self.repo = FakeUserRepository()

    # ── create ────────────────────────────────────────────────

    def test_create_assigns_sequential_ids(self):
        a = self.repo.create(handle='a', email='a@example.com', password_hash='h')
        b = self.repo.create(handle='b', email='b@example.com', password_hash='h')

        self.assertIsInstance(a, User)
        self.assertEqual((a.id, b.id), (1, 2))
        self.assertIsNotNone(a.created_at)
        self.assertEqual(self.repo.create_calls, 2)

    def test_create_rejects_duplicate_handle(self):
        self.repo.create(handle='alice', email='one@example.com', password_hash='h')
        with self.assertRaises(ConflictError):
            self.repo.create(handle='alice', email='two@example.com', password_hash='h')
        self.assertEqual(len(self.repo.store), 1)

    def test_create_rejects_duplicate_email(self):
        self.repo.create(handle='alice', email='same@example.com', password_hash='h')
        with self.assertRaises(ConflictError):
            self.repo.create(handle='bob', email='same@example.com', password_hash='h')

    # ── get_by_handle / get_by_id ─────────────────────────────

    def test_lookups(self):
        created = self.repo.create(handle='alice', email='a@example.com', password_hash='h')

        self.assertEqual(self.repo.get_by_handle('alice'), created)
        self.assertEqual(self.repo.get_by_id(created.id), created)

    def test_lookups_return_none_for_missing(self):
        self.assertIsNone(self.repo.get_by_handle('nobody'))
        self.assertIsNone(self.repo.get_by_id(99))

    def test_returned_users_are_copies(self):
        created = self.repo.create(handle='alice', email='a@example.com', password_hash='h')
        created.email = 'changed@example.com'

        self.assertEqual(self.repo.get_by_id(created.id).email, 'a@example.com')


if __name__ == '__main__':
    unittest.main()
