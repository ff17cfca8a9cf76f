"""
Error taxonomy shared by every activity module.

Services raise these directly; they are HTTPException subclasses so FastAPI
turns them into responses without extra handlers.
"""

from fastapi import HTTPException, status


class AuthFailure(HTTPException):
    def __init__(self, detail: str = "Not authenticated"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ValidationFailure(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)


class ConfirmationRequired(HTTPException):
    def __init__(self, detail: str = "Confirmation required: repeat the request with confirm=true"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class RemoteOperationFailure(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)


class StorageFailure(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)


class AccountAdminUnavailable(HTTPException):
    def __init__(self, detail: str = "Service role key not configured. Account deletion is unavailable."):
        super().__init__(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)
