"""
handlers/employee_handler.py
----------------------------
REST endpoints for employee records under /api/employees.
Parses and validates requests, delegates to EmployeeService and maps
the outcome to an HTTP response. No business logic lives here.
"""

from dataclasses import dataclass, field

import marshmallow
import marshmallow_dataclass
import psycopg2
from flask import Blueprint, Response, request
from flask.views import MethodView

from models.employee import Employee
from services.exceptions import EmployeeAlreadyExistsError
from utils.logger import get_logger

from .util import class_route, error_response, get_employee_service, json_response, validation_error_response

logger = get_logger(__name__)

blp = Blueprint('Employees', __name__)

JSON_VALIDATION_ERROR = 'Request body must be a JSON object.'
EMPLOYEE_NOT_FOUND = 'Employee not found.'


# Employee validation class
@dataclass
class EmployeeBody:
    first_name: str = field(
        metadata={'data_key': 'firstName', 'validate': [marshmallow.validate.Length(min=1, max=255)]}
    )
    last_name: str = field(
        metadata={'data_key': 'lastName', 'validate': [marshmallow.validate.Length(min=1, max=255)]}
    )
    email: str = field(
        metadata={'validate': [marshmallow.validate.Email(), marshmallow.validate.Length(min=1, max=255)]}
    )


def parse_employee_body() -> EmployeeBody | Response:
    """Load the request JSON into an EmployeeBody, or return a 400 response."""
    req_json = request.get_json(silent=True)
    if not isinstance(req_json, dict):
        return error_response(JSON_VALIDATION_ERROR, 400)

    schema = marshmallow_dataclass.class_schema(EmployeeBody)(unknown=marshmallow.EXCLUDE)
    try:
        return schema.load(req_json)
    except marshmallow.ValidationError as err:
        return validation_error_response(err)


@blp.errorhandler(EmployeeAlreadyExistsError)
def handle_already_exists(err: EmployeeAlreadyExistsError) -> Response:
    return error_response(str(err), 409)


@blp.errorhandler(psycopg2.Error)
def handle_storage_error(err: psycopg2.Error) -> Response:
    logger.error(f"Storage failure while handling {request.method} {request.path}: {err}")
    return error_response('Internal server error', 500)


@class_route(blp, '/api/employees')
class Employees(MethodView):
    init_every_request = False

    def get(self) -> Response:
        employees = get_employee_service().get_all_employees()
        return json_response([e.to_dict() for e in employees], 200)

    def post(self) -> Response:
        body = parse_employee_body()
        if isinstance(body, Response):
            return body

        employee = Employee(first_name=body.first_name, last_name=body.last_name, email=body.email)
        saved = get_employee_service().save_employee(employee)
        return json_response(saved.to_dict(), 201)


@class_route(blp, '/api/employees/<int:employee_id>')
class EmployeeDetail(MethodView):
    init_every_request = False

    def get(self, employee_id: int) -> Response:
        employee = get_employee_service().get_employee_by_id(employee_id)
        if employee is None:
            return error_response(EMPLOYEE_NOT_FOUND, 404)
        return json_response(employee.to_dict(), 200)

    def put(self, employee_id: int) -> Response:
        service = get_employee_service()
        saved = service.get_employee_by_id(employee_id)
        if saved is None:
            return error_response(EMPLOYEE_NOT_FOUND, 404)

        body = parse_employee_body()
        if isinstance(body, Response):
            return body

        saved.first_name = body.first_name
        saved.last_name = body.last_name
        saved.email = body.email

        updated = service.update_employee(saved)
        return json_response(updated.to_dict(), 200)

    def delete(self, employee_id: int) -> Response:
        get_employee_service().delete_employee(employee_id)
        return json_response({'message': 'Employee deleted successfully!.'}, 200)
