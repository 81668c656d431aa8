"""
Exception classes for API Headers SDK
"""

from typing import Optional, Dict, Any


class ApiHeadersSDKError(Exception):
    """Base exception for all API Headers SDK errors"""
    
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class ValidationError(ApiHeadersSDKError):
    """Exception raised for validation failures"""
    pass


class ConfigurationError(ApiHeadersSDKError):
    """Exception raised when signing configuration cannot be loaded"""
    pass
