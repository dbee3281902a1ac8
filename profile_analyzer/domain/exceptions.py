class AnalyzerException(Exception):
    """Base exception for all profile-analysis errors."""
    pass

class NotFoundException(AnalyzerException):
    """Raised when GitHub reports the requested user does not exist."""
    def __init__(self, message: str = "User not found"):
        super().__init__(message)

class UnauthorizedException(AnalyzerException):
    """Raised when GitHub rejects the configured token."""
    def __init__(self, message: str = "GitHub Token is invalid or expired."):
        super().__init__(message)

class UpstreamException(AnalyzerException):
    """Raised when GitHub answers with any other non-success status."""
    def __init__(self, status: int, message: str = "GitHub API request failed."):
        self.status = status
        super().__init__(f"{message} Upstream status: {status}")

class ConfigurationException(AnalyzerException):
    """Raised when the server is missing a required setting."""
    def __init__(self, message: str = "Server configuration error: GitHub token missing."):
        super().__init__(message)
