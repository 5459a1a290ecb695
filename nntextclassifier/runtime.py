"""
Process-wide numeric runtime.

Training shards each iteration's batch over a shared worker pool. The pool is
created by init_runtime() (or lazily on first use) and torn down once by
shutdown(); after that every training or inference call raises
RuntimeShutdownError.
"""
import concurrent.futures
import threading

from .config import ClassifierConfig
from .debug_utils import logger
from .errors import RuntimeShutdownError

_lock = threading.Lock()
_executor = None
_thread_count = None
_is_shutdown = False


def init_runtime(thread_count=None):
    """Starts the worker pool. Calling it again while running is a no-op."""
    global _executor, _thread_count
    with _lock:
        if _is_shutdown:
            raise RuntimeShutdownError("Runtime was shut down and cannot be restarted")
        if _executor is None:
            _thread_count = thread_count or ClassifierConfig.THREAD_COUNT
            _executor = concurrent.futures.ThreadPoolExecutor(
                max_workers=_thread_count, thread_name_prefix="nntc-worker"
            )
            logger.info(f"Runtime started with {_thread_count} workers")
        return _executor


def ensure_running():
    if _is_shutdown:
        raise RuntimeShutdownError("Runtime has been shut down")


def get_executor():
    ensure_running()
    return _executor or init_runtime()


def get_thread_count():
    get_executor()
    return _thread_count


def is_shutdown():
    return _is_shutdown


def shutdown():
    """Stops the worker pool. Only the first call has an effect."""
    global _executor, _is_shutdown
    with _lock:
        if _is_shutdown:
            return
        _is_shutdown = True
        executor, _executor = _executor, None
    if executor is not None:
        executor.shutdown(wait=True)
    logger.info("Runtime shut down")


def _reset():
    """Back to the pristine, not-yet-started state. Test helper only."""
    global _executor, _thread_count, _is_shutdown
    with _lock:
        executor, _executor = _executor, None
        _thread_count = None
        _is_shutdown = False
    if executor is not None:
        executor.shutdown(wait=True)
