# app/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from app.domain.errors import CartConflictError
from app.utils.settings import CART_SAVE_ATTEMPTS


def cart_conflict_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(CART_SAVE_ATTEMPTS),
        wait=wait_exponential(multiplier=0.05, min=0.05, max=0.5),
        retry=retry_if_exception_type(CartConflictError),
    )
