"""
services/exceptions.py
----------------------
Business-rule failures raised by the service layer.
"""


class EmployeeAlreadyExistsError(Exception):
    """Raised when creating an employee whose email is already registered."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Employee already exist with email: {email}")
