"""Exception types raised inside dbscope.

Neither type ever reaches an HTTP client as-is: route handlers and the
terminal exception handler translate them into fixed error bodies.
"""


class DbScopeException(Exception):
    """Base class for dbscope exceptions."""


class DatabaseError(DbScopeException):
    """Raised when the database cannot be reached or a statement fails.

    The original driver or SQLAlchemy exception is chained as ``__cause__``.
    """

    def __init__(self, message: str = "Database operation failed"):
        self.message = message
        super().__init__(message)


class UnhandledHandlerError(DbScopeException):
    """Any other exception that escaped a route handler."""

    def __init__(self, method: str, path: str):
        self.method = method
        self.path = path
        super().__init__(f"Unhandled error in {method} {path}")
