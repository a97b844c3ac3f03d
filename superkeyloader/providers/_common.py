"""HTTP plumbing shared by the provider adapters.

Only the request/response handling is shared. Each provider parses and
validates its own response format.
"""

import contextvars
import time
from dataclasses import dataclass

import httpx
import structlog

from superkeyloader.errors import NetworkUnreachableError, TransportStatusError
from superkeyloader.hooks import Hooks, invoke_with_hooks
from superkeyloader.models import Provider

logger = structlog.get_logger(__name__)

# Local storage for latency tracking (tuple stack to support nested calls)
_latency_tracker: contextvars.ContextVar[tuple[float, ...]] = contextvars.ContextVar(
    f"{__name__}.latency_tracker", default=()
)


@dataclass(frozen=True)
class KeysApiCallContext:
    """Context information passed to API call hooks.

    Attributes:
        provider: Provider being queried
        username: Account whose keys are requested
        url: Full request URL
    """

    provider: Provider
    username: str
    url: str


def _request_log_hook(context: KeysApiCallContext) -> None:
    """Built-in hook for logging API requests."""
    logger.debug(
        "API request",
        provider=context.provider.value,
        username=context.username,
        url=context.url,
    )


def _latency_start_hook(_context: KeysApiCallContext) -> None:
    """Built-in hook to start latency measurement."""
    _latency_tracker.set((*_latency_tracker.get(), time.perf_counter()))


def _latency_end_hook(context: KeysApiCallContext) -> None:
    """Built-in hook to log latency measurement."""
    stack = _latency_tracker.get()
    start_time = stack[-1]
    _latency_tracker.set(stack[:-1])
    duration = time.perf_counter() - start_time
    logger.debug(
        "API request finished",
        provider=context.provider.value,
        url=context.url,
        duration=round(duration, 3),
    )


def _error_log_hook(context: KeysApiCallContext) -> None:
    logger.debug("API request failed", provider=context.provider.value, url=context.url)


BUILTIN_HOOKS = Hooks(
    pre_hooks=[_request_log_hook, _latency_start_hook],
    post_hooks=[_latency_end_hook],
    error_hooks=[_error_log_hook],
)


def get(
    context: KeysApiCallContext,
    headers: dict[str, str],
    timeout: float,
    hooks: Hooks,
) -> httpx.Response:
    """Send a single GET request and check its status.

    Args:
        context: Call context (its url is requested)
        headers: Request headers
        timeout: Request timeout in seconds
        hooks: Hooks to run around the request

    Returns:
        The 2xx response

    Raises:
        TransportStatusError: Response status is not 2xx
        NetworkUnreachableError: No response was received at all
    """
    with invoke_with_hooks(
        context,
        pre_hooks=hooks.pre_hooks,
        post_hooks=hooks.post_hooks,
        error_hooks=hooks.error_hooks,
    ):
        try:
            with httpx.Client(
                headers=headers, timeout=timeout, follow_redirects=True
            ) as client:
                response = client.get(context.url)
        except httpx.TransportError as e:
            msg = f"Unable to reach {context.provider.display_name} ({context.url}): {e}"
            raise NetworkUnreachableError(msg) from e

        if not response.is_success:
            raise TransportStatusError(response.status_code)

    return response
