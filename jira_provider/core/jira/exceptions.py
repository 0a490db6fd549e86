"""Jira-specific exceptions for error handling."""
from http import HTTPStatus


class JiraError(Exception):
    """Base exception for all Jira provider operations."""
    pass


class JiraAPIError(JiraError):
    """HTTP error from the Jira REST API or the Atlassian admin API.

    Attributes:
        status_code: HTTP status code (0 when the request never got a response)
        message: Error message or raw response body
        endpoint: API endpoint that failed
    """

    def __init__(self, status_code: int, message: str, endpoint: str):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {message}")

    @property
    def is_not_found(self) -> bool:
        return self.status_code == HTTPStatus.NOT_FOUND

    @property
    def is_bad_request(self) -> bool:
        return self.status_code == HTTPStatus.BAD_REQUEST


class ConfigurationError(JiraError):
    """Provider configuration is missing or invalid."""
    pass
