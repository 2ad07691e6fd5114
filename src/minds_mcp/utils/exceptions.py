"""Custom exceptions for minds-mcp."""


class MindsError(Exception):
    """Base exception for minds-mcp errors."""

    pass


class MindsAPIError(MindsError):
    """Raised when the Minds API answers with a non-success status."""

    def __init__(self, method: str, path: str, status_code: int, text: str, message: str = ""):
        self.method = method
        self.path = path
        self.status_code = status_code
        self.text = text
        super().__init__(message or f"{method} {path} → {status_code}: {text}")


class MindsConnectionError(MindsError):
    """Raised when a request cannot reach the Minds API at all."""

    def __init__(self, method: str, path: str, reason: str = ""):
        self.method = method
        self.path = path
        message = f"{method} {path} failed: could not reach the Minds API"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
