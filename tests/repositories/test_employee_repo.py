from typing import cast
from unittest.mock import MagicMock, patch

import psycopg2
from faker import Faker
from psycopg2 import sql
from unittest_parametrize import ParametrizedTestCase, parametrize

from models import Employee
from repositories.employee_repo import EmployeeRepository


class TestEmployeeRepository(ParametrizedTestCase):
    def setUp(self) -> None:
        self.faker = Faker()
        self.repo = EmployeeRepository()

        self.conn = MagicMock()
        self.cur = self.conn.cursor.return_value.__enter__.return_value

        get_patcher = patch('repositories.employee_repo.get_connection', return_value=self.conn)
        release_patcher = patch('repositories.employee_repo.release_connection')
        get_patcher.start()
        self.release = cast(MagicMock, release_patcher.start())
        self.addCleanup(get_patcher.stop)
        self.addCleanup(release_patcher.stop)

    def gen_employee(self, employee_id: int | None = None) -> Employee:
        return Employee(
            id=employee_id,
            first_name=self.faker.first_name(),
            last_name=self.faker.last_name(),
            email=self.faker.email(),
        )

    def test_save_new_assigns_id(self) -> None:
        employee = self.gen_employee()
        self.cur.fetchone.return_value = (7,)

        saved = self.repo.save(employee)

        self.assertIs(saved, employee)
        self.assertEqual(saved.id, 7)
        params = self.cur.execute.call_args.args[1]
        self.assertEqual(params, (employee.first_name, employee.last_name, employee.email))
        self.conn.commit.assert_called_once()
        self.release.assert_called_once_with(self.conn)

    def test_save_existing_overwrites_row(self) -> None:
        employee = self.gen_employee(employee_id=4)
        self.cur.rowcount = 1

        saved = self.repo.save(employee)

        self.assertEqual(saved.id, 4)
        self.cur.execute.assert_called_once()
        query, params = self.cur.execute.call_args.args
        self.assertIn('UPDATE employee', query)
        self.assertEqual(params, (employee.first_name, employee.last_name, employee.email, 4))
        self.conn.commit.assert_called_once()

    def test_save_unknown_id_inserts_new_row(self) -> None:
        employee = self.gen_employee(employee_id=40)
        self.cur.rowcount = 0
        self.cur.fetchone.return_value = (41,)

        saved = self.repo.save(employee)

        self.assertEqual(saved.id, 41)
        self.assertEqual(self.cur.execute.call_count, 2)
        self.assertIn('INSERT INTO employee', self.cur.execute.call_args.args[0])

    def test_save_storage_error_rolls_back(self) -> None:
        self.cur.execute.side_effect = psycopg2.OperationalError('connection lost')

        with self.assertRaises(psycopg2.OperationalError):
            self.repo.save(self.gen_employee())

        self.conn.rollback.assert_called_once()
        self.conn.commit.assert_not_called()
        self.release.assert_called_once_with(self.conn)

    def test_save_all(self) -> None:
        employees = [self.gen_employee(), self.gen_employee()]
        self.cur.fetchone.side_effect = [(1,), (2,)]

        saved = self.repo.save_all(employees)

        self.assertEqual([e.id for e in saved], [1, 2])

    def test_find_by_id_existing(self) -> None:
        employee = self.gen_employee(employee_id=5)
        self.cur.fetchone.return_value = (5, employee.first_name, employee.last_name, employee.email)

        found = self.repo.find_by_id(5)

        self.assertEqual(found, employee)
        self.assertEqual(self.cur.execute.call_args.args[1], (5,))

    def test_find_by_id_missing(self) -> None:
        self.cur.fetchone.return_value = None

        self.assertIsNone(self.repo.find_by_id(99))
        self.release.assert_called_once_with(self.conn)

    def test_find_all_empty(self) -> None:
        self.cur.fetchall.return_value = []

        self.assertEqual(self.repo.find_all(), [])

    def test_find_all(self) -> None:
        employees = [self.gen_employee(employee_id=1), self.gen_employee(employee_id=2)]
        self.cur.fetchall.return_value = [(e.id, e.first_name, e.last_name, e.email) for e in employees]

        self.assertEqual(self.repo.find_all(), employees)

    def test_find_by_email(self) -> None:
        employee = self.gen_employee(employee_id=3)
        self.cur.fetchone.return_value = (3, employee.first_name, employee.last_name, employee.email)

        found = self.repo.find_by_email(employee.email)

        self.assertEqual(found, employee)
        self.assertEqual(self.cur.execute.call_args.args[1], (employee.email,))

    def test_find_by_email_missing(self) -> None:
        self.cur.fetchone.return_value = None

        self.assertIsNone(self.repo.find_by_email(self.faker.email()))

    @parametrize(
        'method_name,query_type,params',
        [
            ('find_by_names', sql.Composed, ('Jesus', 'Tapia')),
            ('find_by_names_positional', sql.Composed, ('Jesus', 'Tapia')),
            ('find_by_names_named', sql.Composed, {'first_name': 'Jesus', 'last_name': 'Tapia'}),
            ('find_by_names_native', str, ('Jesus', 'Tapia')),
            ('find_by_names_native_named', str, {'first_name': 'Jesus', 'last_name': 'Tapia'}),
        ],
    )
    def test_find_by_names(self, method_name: str, query_type: type, params: tuple | dict) -> None:
        self.cur.fetchall.return_value = [(1, 'Jesus', 'Tapia', 'tapia0@hotmail.com')]

        found = getattr(self.repo, method_name)('Jesus', 'Tapia')

        self.assertEqual(found, [Employee(id=1, first_name='Jesus', last_name='Tapia', email='tapia0@hotmail.com')])
        query, bound = self.cur.execute.call_args.args
        self.assertIsInstance(query, query_type)
        self.assertEqual(bound, params)

    def test_delete_by_id(self) -> None:
        self.cur.rowcount = 1

        self.repo.delete_by_id(8)

        self.assertEqual(self.cur.execute.call_args.args[1], (8,))
        self.conn.commit.assert_called_once()

    def test_delete_by_id_missing_is_noop(self) -> None:
        self.cur.rowcount = 0

        self.repo.delete_by_id(1234)

        self.conn.commit.assert_called_once()
        self.conn.rollback.assert_not_called()
