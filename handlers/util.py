"""
handlers/util.py
----------------
Small helpers shared by the HTTP handlers.
"""

import json
from collections.abc import Callable
from typing import Any

import marshmallow
from flask import Blueprint, Response, current_app
from flask.views import MethodView

from services.employee_service import EmployeeService


def class_route(blueprint: Blueprint, rule: str, **options: Any) -> Callable[[type[MethodView]], type[MethodView]]:
    """Register a MethodView class on `blueprint` under `rule`."""
    def decorator(cls: type[MethodView]) -> type[MethodView]:
        blueprint.add_url_rule(rule, view_func=cls.as_view(cls.__name__), **options)
        return cls

    return decorator


def json_response(data: dict[str, Any] | list[dict[str, Any]], status: int) -> Response:
    return Response(json.dumps(data), status=status, mimetype='application/json')


def error_response(msg: str, code: int) -> Response:
    return json_response({'message': msg, 'code': code}, code)


def validation_error_response(err: marshmallow.ValidationError) -> Response:
    # First message of the first failing field
    field, messages = next(iter(err.normalized_messages().items()))
    if isinstance(messages, list):
        messages = messages[0]
    return error_response(f'Invalid value for {field}: {messages}', 400)


def get_employee_service() -> EmployeeService:
    return current_app.extensions['employee_service']
