# productstore/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import requests
from pymongo.errors import ConnectionFailure

from productstore.utils.settings import MONGO_CONNECT_ATTEMPTS


def http_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
    )


def mongo_connect_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(MONGO_CONNECT_ATTEMPTS),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
        retry=retry_if_exception_type(ConnectionFailure),
    )
