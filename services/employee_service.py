"""
services/employee_service.py
----------------------------
Business logic for managing employee records.
Sits between the HTTP handlers and the EmployeeRepository.
"""

from typing import Optional

from models.employee import Employee
from repositories.employee_repo import EmployeeRepository
from services.exceptions import EmployeeAlreadyExistsError


class EmployeeService:
    """
    Handles all business logic related to employees.

    The only rule enforced here is email uniqueness on creation. Every other
    operation is a direct delegation to the repository. Failures coming from
    the database are not caught.
    """

    def __init__(self, repo: Optional[EmployeeRepository] = None):
        self.repo = repo if repo is not None else EmployeeRepository()

    def save_employee(self, employee: Employee) -> Employee:
        """
        Persist a new employee.

        Args:
            employee: The employee to create.

        Returns:
            The stored employee with its `id` populated.

        Raises:
            EmployeeAlreadyExistsError: If the email is already registered.
        """
        # Not atomic with the insert: concurrent creates may both pass.
        if self.repo.find_by_email(employee.email) is not None:
            raise EmployeeAlreadyExistsError(employee.email)
        return self.repo.save(employee)

    def get_all_employees(self) -> list[Employee]:
        return self.repo.find_all()

    def get_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return the employee, or None when the id is unknown."""
        return self.repo.find_by_id(employee_id)

    def update_employee(self, employee: Employee) -> Employee:
        """Overwrite the stored record with `employee`, keyed by its id."""
        return self.repo.save(employee)

    def delete_employee(self, employee_id: int) -> None:
        self.repo.delete_by_id(employee_id)
