from typing import Dict

from fastapi import status
from libs.result import Error


class ClientError(Exception):
    """Caller mistake; the error code and message are returned verbatim."""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)

    def to_payload(self) -> Dict[str, Dict[str, str]]:
        return {"error": {"code": self.base_error.code, "message": self.base_error.message}}


class ServerError(Exception):
    """Failure on our side; only the code leaves the process."""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    def to_payload(self) -> Dict[str, Dict[str, str]]:
        return {"error": {"code": self.base_error.code, "message": "Internal server error"}}
