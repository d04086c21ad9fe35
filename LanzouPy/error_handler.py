import functools
import logging

import requests

from .errors import BaseLanzouError

logger = logging.getLogger(__name__)


def error_handler(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (BaseLanzouError, requests.exceptions.ConnectionError) as e:
            logger.error(f"Error in {func.__name__}: {str(e).strip()}")
            raise
    return wrapper
