"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from supera_advisor.config import Settings, settings


def get_request_id(request: Request) -> str:
    """Request ID assigned by RequestIDMiddleware"""
    return getattr(request.state, "request_id", "unknown")


def get_settings(request: Request) -> Settings:
    """Settings the running app was created with"""
    return getattr(request.app.state, "settings", settings)
