"""
Chirper Backend — Custom Exception Hierarchy
==============================================

What:  Defines application-specific exceptions for the request outcomes.
Why:   The RequestHandler signals failures by raising; global exception
       handlers (registered in main.py) turn each type into its status code.
How:   Each exception class carries a message and optional context dict.
       The message and context are logged server-side.
Who:   Raised by RequestHandler (domain errors) and gateways (DatabaseError).
When:  During request processing.

Exception Hierarchy:
    ChirperError (base)        → 500 Internal Server Error
    ├── InvalidInputError      → 400 Bad Request (failed a validation rule)
    ├── UnauthorizedError      → 401 Unauthorized (no matching credentials)
    ├── ConflictError          → 409 Conflict (username already taken)
    └── DatabaseError          → 500 Internal Server Error (store failure)

    400/401/409 responses carry no body. 500 responses carry the JSON error
    envelope with a generic message and the request ID.
"""

from typing import Any, Dict, Optional


class ChirperError(Exception):
    """
    Base exception for all Chirper application errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidInputError(ChirperError):
    """
    Raised when an account or message payload fails a business rule.

    When:    Blank username, short password, blank or over-long message text,
             unknown author, or updating a message that does not exist.
    HTTP:    400 Bad Request

    The response code is the same for every cause; `field` and `context`
    record which rule failed for the logs.
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Invalid input",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UnauthorizedError(ChirperError):
    """
    Raised when no account matches a username/password pair.

    HTTP:    401 Unauthorized
    """

    status_code = 401

    def __init__(
        self,
        message: str = "Invalid username or password",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ConflictError(ChirperError):
    """
    Raised when a registration collides with an existing username.

    When:    The lookup finds the username, or the unique constraint rejects
             the insert because a concurrent registration got there first.
    HTTP:    409 Conflict
    """

    status_code = 409

    def __init__(
        self,
        message: str = "Username is already taken",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(ChirperError):
    """
    Raised when a store operation fails unexpectedly.

    What:    A query, insert, update or delete raised inside SQLAlchemy.
    HTTP:    500 Internal Server Error

    Not retried. The client always gets a generic message; the original
    exception type is kept in `context` for the logs.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
