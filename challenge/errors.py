class ChallengeError(Exception):
    """Base class for anything that stops a challenge run."""


class NetworkError(ChallengeError):
    """Transport failure, timeout or non-2xx reply."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DeserializationError(ChallengeError):
    """Reply body was not JSON or did not have the expected shape."""

    def __init__(self, message: str, url: str, body: str | None = None):
        super().__init__(message)
        self.url = url
        self.body = body
