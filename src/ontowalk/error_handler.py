"""
Retry handling for document fetches

Failures are classified by cause; timeouts, dropped connections, 5xx and
429 responses are retried with exponential backoff, everything else is
re-raised at once.
"""

import asyncio
import random
import time
import logging
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional

import aiohttp

from .errors import FetchFailed

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Cause of a failed fetch attempt"""
    NETWORK_TIMEOUT = "network_timeout"
    CONNECTION_ERROR = "connection_error"
    HTTP_CLIENT_ERROR = "http_client_error"
    HTTP_SERVER_ERROR = "http_server_error"
    RATE_LIMITED = "rate_limited"
    PARSING_ERROR = "parsing_error"
    UNKNOWN_ERROR = "unknown_error"


TRANSIENT_ERRORS = (
    ErrorType.NETWORK_TIMEOUT,
    ErrorType.CONNECTION_ERROR,
    ErrorType.HTTP_SERVER_ERROR,
    ErrorType.RATE_LIMITED,
)

# Errors the handler records and may retry; anything else propagates untouched
HANDLED_EXCEPTIONS = (aiohttp.ClientError, asyncio.TimeoutError, FetchFailed)


@dataclass
class RetryConfig:
    """How often and how patiently a fetch is retried"""
    max_attempts: int = 3
    base_delay: float = 1.0
    max_delay: float = 30.0
    exponential_base: float = 2.0
    jitter: bool = True
    retryable_errors: List[ErrorType] = field(default_factory=lambda: list(TRANSIENT_ERRORS))

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay < 0 or self.max_delay < 0:
            raise ValueError("retry delays must not be negative")


@dataclass
class ErrorInfo:
    """One failed attempt"""
    identifier: str
    error_type: ErrorType
    status_code: Optional[int]
    message: str
    attempt: int
    elapsed: float
    timestamp: float = field(default_factory=time.time)


def status_of(error: BaseException) -> Optional[int]:
    """HTTP status carried by a FetchFailed or an aiohttp response error"""
    return getattr(error, 'status_code', None) or getattr(error, 'status', None)


class ErrorHandler:
    """Runs fetch attempts and keeps a history of their failures"""

    def __init__(self, retry_config: RetryConfig = None):
        self.retry_config = retry_config or RetryConfig()
        self.error_history: List[ErrorInfo] = []
        self.failed_identifiers: Dict[str, List[ErrorInfo]] = defaultdict(list)

    def classify_error(self, error: BaseException, status_code: Optional[int] = None) -> ErrorType:
        if isinstance(error, asyncio.TimeoutError):
            return ErrorType.NETWORK_TIMEOUT
        if isinstance(error, aiohttp.ClientConnectionError):
            return ErrorType.CONNECTION_ERROR

        if status_code == 429:
            return ErrorType.RATE_LIMITED
        if status_code and 400 <= status_code < 500:
            return ErrorType.HTTP_CLIENT_ERROR
        if status_code and 500 <= status_code < 600:
            return ErrorType.HTTP_SERVER_ERROR

        if not status_code and "pars" in str(error).lower():
            return ErrorType.PARSING_ERROR
        return ErrorType.UNKNOWN_ERROR

    def is_retryable(self, error_type: ErrorType, attempt: int) -> bool:
        """Whether attempt number ``attempt`` may be followed by another"""
        return attempt < self.retry_config.max_attempts and error_type in self.retry_config.retryable_errors

    def calculate_delay(self, attempt: int, error_type: ErrorType) -> float:
        """Backoff before the attempt after ``attempt``; doubled when rate limited"""
        config = self.retry_config
        delay = config.base_delay * config.exponential_base ** (attempt - 1)
        if error_type is ErrorType.RATE_LIMITED:
            delay *= 2
        delay = min(delay, config.max_delay)

        if config.jitter:
            delay *= 1 + 0.1 * random.random()
        return delay

    def _record(self, identifier: str, error: BaseException, attempt: int, started: float) -> ErrorInfo:
        status_code = status_of(error)
        info = ErrorInfo(
            identifier=identifier,
            error_type=self.classify_error(error, status_code),
            status_code=status_code,
            message=str(error),
            attempt=attempt,
            elapsed=time.time() - started
        )
        self.error_history.append(info)
        self.failed_identifiers[identifier].append(info)
        return info

    async def execute_with_retry(self, func: Callable[..., Awaitable[Any]], identifier: str, *args, **kwargs) -> Any:
        """Await ``func(*args, **kwargs)`` until it succeeds or may not be retried

        The error of the final attempt is re-raised unchanged.
        """
        attempt = 0
        while True:
            attempt += 1
            started = time.time()
            try:
                result = await func(*args, **kwargs)
            except HANDLED_EXCEPTIONS as error:
                info = self._record(identifier, error, attempt, started)
                if not self.is_retryable(info.error_type, attempt):
                    logger.warning(f"Giving up on {identifier} after {attempt} attempt(s): "
                                   f"{info.error_type.value} - {error}")
                    raise

                delay = self.calculate_delay(attempt, info.error_type)
                logger.info(f"🔄 Retrying {identifier} in {delay:.1f}s ({info.error_type.value})")
                await asyncio.sleep(delay)
                continue

            self.failed_identifiers.pop(identifier, None)
            return result

    def get_error_summary(self) -> Dict[str, Any]:
        if not self.error_history:
            return {"total_errors": 0}

        counts = Counter(info.error_type.value for info in self.error_history)
        return {
            "total_errors": len(self.error_history),
            "failed_identifiers": len(self.failed_identifiers),
            "error_types": dict(counts)
        }

    def get_failed_identifiers(self) -> List[str]:
        """Identifiers whose most recent attempt failed"""
        return list(self.failed_identifiers)
