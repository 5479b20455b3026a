"""
main.py
-------
Entry point for the employee registry service.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Build the Flask application and register all handlers.
    - Serve HTTP requests until interrupted.
"""

from typing import Optional

from flask import Flask

from config import APP_HOST, APP_PORT
from db.connection import close_pool, init_pool
from db.init_db import create_tables
from handlers import BlueprintEmployee, BlueprintHealth
from services.employee_service import EmployeeService
from utils.logger import get_logger

logger = get_logger(__name__)


def create_app(employee_service: Optional[EmployeeService] = None) -> Flask:
    """
    Build the Flask application.

    Args:
        employee_service: Service used by the handlers. A service backed by
            the PostgreSQL repository is created when omitted.

    Returns:
        The configured Flask application.
    """
    app = Flask(__name__)
    if employee_service is None:
        employee_service = EmployeeService()
    app.extensions['employee_service'] = employee_service

    app.register_blueprint(BlueprintHealth)
    app.register_blueprint(BlueprintEmployee)

    return app


def main() -> None:
    """Initialize and run the service."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    create_tables()

    # ── 2. Build the Flask application ────────────────────
    app = create_app()

    # ── 3. Serve ──────────────────────────────────────────
    logger.info(f"Employee service listening on {APP_HOST}:{APP_PORT}")
    try:
        app.run(host=APP_HOST, port=APP_PORT)
    finally:
        # ── 4. Cleanup on shutdown ────────────────────────
        close_pool()
        logger.info("Employee service stopped.")


if __name__ == "__main__":
    main()
