"""Dependency injection for FastAPI endpoints"""

from typing import Optional
from fastapi import Header, Request


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_actor(x_actor_id: Optional[str] = Header(default=None)) -> Optional[str]:
    """Reviewer identity supplied by the session layer, used for audit logging only"""
    return x_actor_id
