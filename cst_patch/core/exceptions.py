"""
Exception hierarchy for CST patching operations.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""


class CSTPatchError(Exception):
    """Base exception for CST patching operations."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class UnsupportedOperationError(CSTPatchError):
    """Raised when an operation of unknown kind is passed to the index."""

    def __init__(self, message: str, kind: object = None, details: dict = None):
        """
        Initialize unsupported operation error.

        Args:
            message: Error message
            kind: Kind tag carried by the rejected operation
            details: Optional additional details
        """
        super().__init__(message, code="UNSUPPORTED_OPERATION", details=details)
        self.kind = kind


class UnsupportedTraversalError(CSTPatchError):
    """Raised when no traversal adapter can serve the installed LibCST."""

    def __init__(self, message: str, version: str = None, details: dict = None):
        """
        Initialize unsupported traversal error.

        Args:
            message: Error message
            version: LibCST version string that was probed, if any
            details: Optional additional details
        """
        super().__init__(message, code="UNSUPPORTED_TRAVERSAL", details=details)
        self.version = version


class RootRewriteError(CSTPatchError):
    """Raised when the root of a tree would be replaced by several nodes."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, code="ROOT_REWRITE_ERROR", details=details)


class NodeNotFoundError(CSTPatchError):
    """Raised when a node lookup matched nothing."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, code="NODE_NOT_FOUND", details=details)


class AmbiguousNodeError(CSTPatchError):
    """Raised when a node lookup expected one match but found several."""

    def __init__(self, message: str, count: int = 0, details: dict = None):
        super().__init__(message, code="AMBIGUOUS_NODE", details=details)
        self.count = count


class ConfigError(CSTPatchError):
    """Raised when transform configuration cannot be loaded."""

    def __init__(self, message: str, field: str = None, details: dict = None):
        """
        Initialize configuration error.

        Args:
            message: Error message
            field: Optional field name that failed validation
            details: Optional additional details
        """
        super().__init__(message, code="CONFIG_ERROR", details=details)
        self.field = field
