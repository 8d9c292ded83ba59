"""Custom exceptions for the sentiment dashboard"""

from typing import Any, Dict, List, Optional


class AppError(Exception):
    """
    Base exception for all application errors

    Attributes:
        message: Human-readable error message
        code: Short error code for identification
    """

    code: str = "GENERAL_ERROR"
    message: str = "An application error occurred"

    def __init__(
        self,
        code: Optional[str] = None,
        message: Optional[str] = None,
        **kwargs: Any
    ):
        self.code = code or self.code
        self.message = message or self.message
        self.extra = kwargs
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for response"""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                **self.extra,
            }
        }

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

class ConfigurationError(AppError):
    """Raised when the provider credential is missing"""
    code = "CONFIGURATION_ERROR"
    message = "The application is not configured correctly"

class RemoteError(AppError):
    """
    Raised when the proxy reports that the upstream model call failed

    Attributes:
        error: Error label returned by the proxy
        details: Provider message, if the proxy included one
    """
    code = "REMOTE_ERROR"
    message = "The analysis service reported an error"

    def __init__(self, error: str, details: Optional[str] = None):
        self.error = error
        self.details = details
        text = f"API Error: {error}"
        if details:
            text = f"{text} - {details}"
        super().__init__(message=text, error=error, details=details)

class MalformedPayloadError(AppError):
    """Raised when the proxy response cannot be decoded as JSON"""
    code = "MALFORMED_PAYLOAD"
    message = "The analysis service returned a response that is not valid JSON"

class SchemaViolationError(AppError):
    """
    Raised when a decoded payload does not match the analysis schema

    Attributes:
        violations: One {"field", "message"} entry per offending field
    """
    code = "SCHEMA_VIOLATION"
    message = "The analysis result does not match the expected schema"

    def __init__(self, violations: List[Dict[str, str]], message: Optional[str] = None):
        self.violations = violations
        if message is None and violations:
            fields = ", ".join(v["field"] for v in violations)
            message = f"Invalid analysis result fields: {fields}"
        super().__init__(message=message, violations=violations)

class NetworkError(AppError):
    """Raised when the request from the page to the proxy fails"""
    code = "NETWORK_ERROR"
    message = "Could not reach the analysis service"

class AnalysisTimeoutError(AppError):
    """Raised when the analysis did not finish within the configured bound"""
    code = "TIMEOUT"
    message = "The analysis took too long. Please try again"
