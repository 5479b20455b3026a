"""
repositories/employee_repo.py
-----------------------------
Data access layer for employee records.
All SQL queries related to the `employee` table live here.
"""

from typing import Iterable, Optional

from psycopg2 import sql

from db.connection import get_connection, release_connection
from models.employee import Employee
from utils.logger import get_logger

logger = get_logger(__name__)

TABLE = "employee"
COLUMNS = ("id", "first_name", "last_name", "email")

# Composed from the column mapping, positional and named binding
_NAMES_QUERY = sql.SQL("SELECT {columns} FROM {table} WHERE {first} = {p1} AND {last} = {p2};")
_FIND_BY_NAMES = _NAMES_QUERY.format(
    columns=sql.SQL(", ").join(map(sql.Identifier, COLUMNS)),
    table=sql.Identifier(TABLE),
    first=sql.Identifier("first_name"),
    last=sql.Identifier("last_name"),
    p1=sql.Placeholder(),
    p2=sql.Placeholder(),
)
_FIND_BY_NAMES_NAMED = _NAMES_QUERY.format(
    columns=sql.SQL(", ").join(map(sql.Identifier, COLUMNS)),
    table=sql.Identifier(TABLE),
    first=sql.Identifier("first_name"),
    last=sql.Identifier("last_name"),
    p1=sql.Placeholder("first_name"),
    p2=sql.Placeholder("last_name"),
)

# Literal SQL, positional and named binding
_FIND_BY_NAMES_NATIVE = (
    "SELECT id, first_name, last_name, email FROM employee e "
    "WHERE e.first_name = %s AND e.last_name = %s;"
)
_FIND_BY_NAMES_NATIVE_NAMED = (
    "SELECT id, first_name, last_name, email FROM employee e "
    "WHERE e.first_name = %(first_name)s AND e.last_name = %(last_name)s;"
)


class EmployeeRepository:
    """Repository for CRUD operations on the employee table."""

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, employee: Employee) -> Employee:
        """
        Insert a new employee or overwrite an existing one.

        A record without an ``id`` is inserted. A record with an ``id`` is
        written over the matching row; if no row has that id the record is
        inserted and receives a freshly generated id.

        Args:
            employee: The Employee domain object to persist.

        Returns:
            The same Employee with its `id` populated.
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                if employee.id is None:
                    self._insert(cur, employee)
                    action = "Added"
                else:
                    cur.execute(
                        """
                        UPDATE employee
                        SET first_name = %s, last_name = %s, email = %s
                        WHERE id = %s;
                        """,
                        (employee.first_name, employee.last_name, employee.email, employee.id),
                    )
                    if cur.rowcount > 0:
                        action = "Updated"
                    else:
                        self._insert(cur, employee)
                        action = "Added"
            conn.commit()
            logger.info(f"{action} employee #{employee.id}")
            return employee
        except Exception:
            conn.rollback()
            raise
        finally:
            release_connection(conn)

    def save_all(self, employees: Iterable[Employee]) -> list[Employee]:
        """Save each employee in turn and return them with ids populated."""
        return [self.save(employee) for employee in employees]

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """
        Fetch a single employee by primary key.

        Returns:
            An Employee object or None if not found.
        """
        query = "SELECT id, first_name, last_name, email FROM employee WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(query, (employee_id,))
                row = cur.fetchone()
                return self._row_to_employee(row) if row else None
        finally:
            release_connection(conn)

    def find_all(self) -> list[Employee]:
        """Fetch every employee, ordered by id."""
        query = "SELECT id, first_name, last_name, email FROM employee ORDER BY id;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(query)
                return [self._row_to_employee(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    def find_by_email(self, email: str) -> Optional[Employee]:
        """
        Fetch the employee registered with an email address.

        Returns:
            An Employee object or None if not found.
        """
        query = "SELECT id, first_name, last_name, email FROM employee WHERE email = %s LIMIT 1;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(query, (email,))
                row = cur.fetchone()
                return self._row_to_employee(row) if row else None
        finally:
            release_connection(conn)

    def find_by_names(self, first_name: str, last_name: str) -> list[Employee]:
        """
        Fetch all employees matching both first and last name.

        Returns:
            List of Employee objects, empty when nothing matches.
        """
        return self._find_by_names(_FIND_BY_NAMES, (first_name, last_name))

    # The variants below return exactly what find_by_names returns; they
    # differ only in how the statement is written and parameters are bound.

    def find_by_names_positional(self, first_name: str, last_name: str) -> list[Employee]:
        """Composed query, positional parameters."""
        return self._find_by_names(_FIND_BY_NAMES, (first_name, last_name))

    def find_by_names_named(self, first_name: str, last_name: str) -> list[Employee]:
        """Composed query, named parameters."""
        return self._find_by_names(
            _FIND_BY_NAMES_NAMED, {"first_name": first_name, "last_name": last_name}
        )

    def find_by_names_native(self, first_name: str, last_name: str) -> list[Employee]:
        """Literal SQL, positional parameters."""
        return self._find_by_names(_FIND_BY_NAMES_NATIVE, (first_name, last_name))

    def find_by_names_native_named(self, first_name: str, last_name: str) -> list[Employee]:
        """Literal SQL, named parameters."""
        return self._find_by_names(
            _FIND_BY_NAMES_NATIVE_NAMED, {"first_name": first_name, "last_name": last_name}
        )

    # ── DELETE ────────────────────────────────────────────

    def delete_by_id(self, employee_id: int) -> None:
        """Delete an employee by ID. Deleting a missing ID is a no-op."""
        query = "DELETE FROM employee WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(query, (employee_id,))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted employee #{employee_id}")
        except Exception:
            conn.rollback()
            raise
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    def _find_by_names(self, query, params) -> list[Employee]:
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(query, params)
                return [self._row_to_employee(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    @staticmethod
    def _insert(cur, employee: Employee) -> None:
        cur.execute(
            """
            INSERT INTO employee (first_name, last_name, email)
            VALUES (%s, %s, %s)
            RETURNING id;
            """,
            (employee.first_name, employee.last_name, employee.email),
        )
        employee.id = cur.fetchone()[0]

    @staticmethod
    def _row_to_employee(row: tuple) -> Employee:
        """Convert a database row tuple to an Employee domain object."""
        return Employee(
            id=row[0],
            first_name=row[1],
            last_name=row[2],
            email=row[3],
        )
