"""Domain error taxonomy shared by services and routers.

Each error carries a short public ``flag`` that routers put in the redirect
query string. The message is for server-side logs only.
"""


class AppError(Exception):
    flag = "falha"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationFailure(AppError):
    flag = "invalido"


class NotFound(AppError):
    flag = "nao_encontrado"


class Conflict(AppError):
    flag = "conflito"


class StorageFailure(AppError):
    flag = "falha"


class AuthFailure(AppError):
    flag = "1"


class LoginRequired(Exception):
    """Raised by the access guard when the session carries no administrator."""
