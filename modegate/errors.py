class HTTPError(Exception):
    code = "HTTP_ERROR"

    def __init__(self, message: str, status_code: int = 500, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        if code is not None:
            self.code = code


class MaintenanceError(HTTPError):
    code = "maintenance"

    def __init__(self, message: str, *, retry_after_seconds: int | None = None) -> None:
        super().__init__(message, 503)
        self.retry_after_seconds = retry_after_seconds


class BadConfigError(HTTPError):
    code = "http/bad-config"

    def __init__(self, message: str) -> None:
        super().__init__(message, 503)


class InvalidRequirementError(ValueError):
    pass
