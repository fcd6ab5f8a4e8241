"""
API Gateway component.

Exposes the tool registry as a small RESTful API.
"""

from toolhub.api_gateway.gateway import (
    SystemHealth,
    create_app,
    get_registry,
    run_gateway
)

__all__ = [
    "SystemHealth",
    "create_app",
    "get_registry",
    "run_gateway"
]
