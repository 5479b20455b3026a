"""
handlers/ - Presentation Layer
==============================
Flask blueprints. Each handler receives an HTTP request,
delegates to the appropriate Service, and sends the response back to the client.
No business logic lives here.
"""

from .employee_handler import blp as BlueprintEmployee  # noqa: N812
from .health_handler import blp as BlueprintHealth  # noqa: N812

__all__ = ['BlueprintEmployee', 'BlueprintHealth']
