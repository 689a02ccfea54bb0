"""Tests for the manage_users operator CLI."""

import io
import json
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from sqlalchemy import create_engine

from adapter.external.bcrypt_hasher import BcryptPasswordHasher
from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import StoreError
from scripts import manage_users
from services.account_store import AccountStore


@patch('scripts.manage_users.setup_structured_logging')
class TestManageUsers(unittest.TestCase):

    def setUp(self):
        self.store = AccountStore(FakeUserRepository(), BcryptPasswordHasher(rounds=4))

    def _run(self, argv, password='s3cret'):
        out, err = io.StringIO(), io.StringIO()
        with patch('scripts.manage_users.getpass.getpass', return_value=password), \
                redirect_stdout(out), redirect_stderr(err):
            code = manage_users.main(argv, store=self.store)
        return code, out.getvalue(), err.getvalue()

    def test_register_prints_public_fields(self, _logging):
        code, out, _ = self._run(['register', '--handle', 'alice', '--email', 'a@example.com'])

        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data['id'], 1)
        self.assertEqual(data['handle'], 'alice')
        self.assertNotIn('password_hash', data)
        self.assertNotIn('$2b$', out)

    def test_login_and_show(self, _logging):
        self._run(['register', '--handle', 'alice', '--email', 'a@example.com'])

        code, out, _ = self._run(['login', '--handle', 'alice'])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)['handle'], 'alice')

        code, out, _ = self._run(['show', '--id', '1'])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)['email'], 'a@example.com')

    def test_bad_login_exits_with_generic_error(self, _logging):
        self._run(['register', '--handle', 'alice', '--email', 'a@example.com'])

        code, out, err = self._run(['login', '--handle', 'alice'], password='wrong')

        self.assertEqual(code, 1)
        self.assertEqual(out, '')
        self.assertIn('The handle or password was invalid', err)

    def test_empty_password_rejected(self, _logging):
        code, _, err = self._run(['register', '--handle', 'alice', '--email', 'a@example.com'], password='')

        self.assertEqual(code, 1)
        self.assertIn('No password was provided', err)

    def test_init_db_unreachable_database_reports_store_error(self, _logging):
        engine = create_engine('sqlite:////nonexistent-dir/forum.db')

        with patch('scripts.manage_users.get_engine', return_value=engine):
            code, out, err = self._run(['init-db'])

        self.assertEqual(code, 1)
        self.assertEqual(out, '')
        self.assertIn(StoreError.MESSAGE, err)
        self.assertNotIn('sqlite3', err)
        engine.dispose()

    def test_show_requires_a_selector(self, _logging):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            manage_users.main(['show'], store=self.store)


if __name__ == '__main__':
    unittest.main()
