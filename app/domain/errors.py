# app/domain/errors.py
"""
Bledy domenowe. Kazdy ma status HTTP i komunikat ktory trafia do klienta
jako {"message": ...}, bez szczegolow wyjatku.
"""


class ShopError(Exception):
    status_code = 500
    message = "Server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class BadRequestError(ShopError):
    status_code = 400
    message = "Bad request"


class UnauthorizedError(ShopError):
    status_code = 401
    message = "Not authorized"


class ForbiddenError(ShopError):
    status_code = 403
    message = "Forbidden"


class NotFoundError(ShopError):
    status_code = 404
    message = "Not found"


class CartConflictError(ShopError):
    """Zapis koszyka na nieaktualnej wersji (optimistic locking)."""

    status_code = 409
    message = "Cart was modified concurrently"


class ServerError(ShopError):
    status_code = 500
    message = "Server error"
