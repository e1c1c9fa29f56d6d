#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsbeautify/workers.py
"""Thread-confined access to a shared js-beautify engine.

A :class:`~jsbeautify.engine.Beautifier` is bound to a single interpreter
context that tolerates one caller at a time, and QuickJS checks its stack
limit against the thread that created it. The wrappers here therefore own
a single worker thread that creates the engine and performs every call on
it; callers on any thread, or on an event loop, queue work onto that
worker.

- :class:`SharedBeautifier` - blocking API, safe to call from many threads
- :class:`AsyncBeautifier` - coroutine API for asyncio code

Both wrappers are context managers and must be closed to stop the worker.
"""

from __future__ import annotations

import asyncio
import functools
import logging
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, TypeVar

from jsbeautify.constants import Language
from jsbeautify.engine import Beautifier
from jsbeautify.options import BeautifyOptions, OptionsLike

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _EngineWorker:
    """Owns a Beautifier and the only thread allowed to touch it."""

    def __init__(self, assets_dir: str | os.PathLike[str] | None = None):
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="jsbeautify")
        self._closed = False
        try:
            self._engine: Beautifier = self._executor.submit(Beautifier, assets_dir).result()
        except BaseException:
            self._executor.shutdown(wait=False)
            raise

    def submit(self, func: Callable[..., T], *args: Any) -> Future[T]:
        if self._closed:
            raise RuntimeError("The js-beautify worker has been closed")
        return self._executor.submit(func, *args)

    @property
    def engine(self) -> Beautifier:
        return self._engine

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._executor.shutdown(wait=True)
            logger.debug("js-beautify worker stopped")


class SharedBeautifier:
    """Blocking js-beautify facade that any number of threads may share.

    Calls are serialized through one worker thread; each call blocks until
    its result is ready.

    Parameters
    ----------
    assets_dir : str or PathLike, optional
        Passed to :class:`~jsbeautify.engine.Beautifier`

    Raises
    ------
    DependencyError, EngineUnavailableError
        Propagated from engine construction

    Examples
    --------
        >>> with SharedBeautifier() as beautifier:
        ...     beautifier.beautify_css("a{color:red}")
        'a {\\n    color: red\\n}'

    """

    def __init__(self, assets_dir: str | os.PathLike[str] | None = None):
        self._worker = _EngineWorker(assets_dir)

    def __enter__(self) -> SharedBeautifier:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Stop the worker thread; further calls raise RuntimeError."""
        self._worker.close()

    def beautify(self, language: Language, source: str, options: OptionsLike = None) -> str:
        """Format ``source``; see :meth:`Beautifier.beautify`."""
        return self._worker.submit(self._worker.engine.beautify, language, source, options).result()

    def beautify_js(self, source: str, options: OptionsLike = None) -> str:
        return self.beautify("js", source, options)

    def beautify_css(self, source: str, options: OptionsLike = None) -> str:
        return self.beautify("css", source, options)

    def beautify_html(self, source: str, options: OptionsLike = None) -> str:
        return self.beautify("html", source, options)

    def default_options(self, language: Language) -> BeautifyOptions:
        """Return the formatter's built-in defaults; see :meth:`Beautifier.default_options`."""
        return self._worker.submit(self._worker.engine.default_options, language).result()

    def default_js_options(self) -> BeautifyOptions:
        return self.default_options("js")

    def default_css_options(self) -> BeautifyOptions:
        return self.default_options("css")

    def default_html_options(self) -> BeautifyOptions:
        return self.default_options("html")

    def available_resources(self, suffix: str = "js") -> list[str]:
        return self._worker.submit(self._worker.engine.available_resources, suffix).result()


class AsyncBeautifier:
    """Coroutine js-beautify facade that exclusively owns its engine.

    Each call is queued to the worker thread and awaited without blocking
    the event loop. Calls run one at a time in submission order.

    Use :meth:`create` to build one from a coroutine without blocking the
    loop during bundle loading.

    Parameters
    ----------
    assets_dir : str or PathLike, optional
        Passed to :class:`~jsbeautify.engine.Beautifier`

    Examples
    --------
        >>> async def main():
        ...     async with await AsyncBeautifier.create() as beautifier:
        ...         return await beautifier.beautify_js("var a=1")

    """

    def __init__(self, assets_dir: str | os.PathLike[str] | None = None):
        self._worker = _EngineWorker(assets_dir)

    @classmethod
    async def create(cls, assets_dir: str | os.PathLike[str] | None = None) -> AsyncBeautifier:
        """Construct the engine off the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(cls, assets_dir))

    async def __aenter__(self) -> AsyncBeautifier:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Stop the worker thread once queued calls have finished."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._worker.close)

    async def _run(self, func: Callable[..., T], *args: Any) -> T:
        return await asyncio.wrap_future(self._worker.submit(func, *args))

    async def beautify(self, language: Language, source: str, options: OptionsLike = None) -> str:
        """Format ``source``; see :meth:`Beautifier.beautify`."""
        return await self._run(self._worker.engine.beautify, language, source, options)

    async def beautify_js(self, source: str, options: OptionsLike = None) -> str:
        return await self.beautify("js", source, options)

    async def beautify_css(self, source: str, options: OptionsLike = None) -> str:
        return await self.beautify("css", source, options)

    async def beautify_html(self, source: str, options: OptionsLike = None) -> str:
        return await self.beautify("html", source, options)

    async def default_options(self, language: Language) -> BeautifyOptions:
        """Return the formatter's built-in defaults; see :meth:`Beautifier.default_options`."""
        return await self._run(self._worker.engine.default_options, language)

    async def default_js_options(self) -> BeautifyOptions:
        return await self.default_options("js")

    async def default_css_options(self) -> BeautifyOptions:
        return await self.default_options("css")

    async def default_html_options(self) -> BeautifyOptions:
        return await self.default_options("html")


# Process-wide engine used by the module-level helpers
_default_beautifier: SharedBeautifier | None = None
_default_beautifier_lock = threading.Lock()


def get_default_beautifier() -> SharedBeautifier:
    """Get or create the process-wide shared engine.

    Returns
    -------
    SharedBeautifier
        The global singleton instance

    """
    global _default_beautifier
    if _default_beautifier is None:
        with _default_beautifier_lock:
            if _default_beautifier is None:
                _default_beautifier = SharedBeautifier()
    return _default_beautifier


def reset_default_beautifier() -> None:
    """Close and drop the process-wide engine; the next use recreates it."""
    global _default_beautifier
    with _default_beautifier_lock:
        if _default_beautifier is not None:
            _default_beautifier.close()
            _default_beautifier = None
