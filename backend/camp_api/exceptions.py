"""
Camp API Backend: Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the few ways a request can fail.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services, serializers and the registry.

Exception Hierarchy:
    CampApiError (base)
    ├── NotFoundError          → registry lookup miss (programmatic callers)
    ├── SerializationError     → 500 Internal Server Error
    ├── DatabaseError          → 500 Internal Server Error
    └── RegistryError          → raised at startup, never during a request

Only `message` is ever returned to clients. `context` is for the server log.
"""

from typing import Any, Dict, Optional


class CampApiError(Exception):
    """
    Base exception for all Camp API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(CampApiError):
    """
    Raised when a requested resource does not exist.

    When:    ApiRegistry.get() for an unregistered (version, collection) pair.
    HTTP:    not mapped; unknown URL paths never reach the registry and get
             the framework 404.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class SerializationError(CampApiError):
    """
    Raised when a record cannot be projected onto its field allowlist.

    When:    A record lacks an allowlisted attribute, or a value does not
             fit the declared field type.
    HTTP:    500 Internal Server Error (the client cannot fix this)

    Context carries the serializer root key and the offending field names.
    """

    def __init__(
        self,
        message: str = "A record could not be serialized",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(CampApiError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Driver errors,
    SQL text and table names stay in the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RegistryError(CampApiError):
    """Invalid or conflicting API registration, raised while the app is assembled."""

    def __init__(
        self,
        message: str = "Invalid API registration",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
