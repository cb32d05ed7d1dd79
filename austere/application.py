"""Base class for applications run by the engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

log = logging.getLogger(__name__)

AppHook = Callable[["Application"], None]


@dataclass(frozen=True)
class ApplicationInfo:
    """Descriptive metadata of an application."""

    name: str = ""
    version: str = ""
    author: str = ""
    description: str = ""


class Application:
    """An application driven by the engine.

    Behaviour is supplied either by overriding the ``on_*`` hooks in a
    subclass or by passing callables for them to the constructor; each
    callable receives the application.

    Usable as a context manager: entering initializes, leaving shuts down.
    """

    def __init__(
        self,
        info: Optional[ApplicationInfo] = None,
        *,
        on_initialize: Optional[AppHook] = None,
        on_shutdown: Optional[AppHook] = None,
        on_update: Optional[AppHook] = None,
        on_render: Optional[AppHook] = None,
    ) -> None:
        self.info = info if info is not None else ApplicationInfo()
        self.engine: Any = None
        self._initialized = False
        self._hooks: dict[str, Optional[AppHook]] = {
            "initialize": on_initialize,
            "shutdown": on_shutdown,
            "update": on_update,
            "render": on_render,
        }

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def version(self) -> str:
        return self.info.version

    @property
    def author(self) -> str:
        return self.info.author

    @property
    def description(self) -> str:
        return self.info.description

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        log.info("Initializing application...")
        if self._initialized:
            raise RuntimeError("application is already initialized")
        self.on_initialize()
        self._initialized = True
        log.info("Application initialized")

    def shutdown(self) -> None:
        log.info("Shutting down application...")
        if not self._initialized:
            raise RuntimeError("application is not initialized")
        self.on_shutdown()
        self._initialized = False
        log.info("Application shut down")

    def update(self) -> None:
        if self._initialized:
            self.on_update()

    def render(self) -> None:
        if self._initialized:
            self.on_render()

    def set_engine(self, engine: Any) -> None:
        self.engine = engine

    def __enter__(self) -> Application:
        self.initialize()
        return self

    def __exit__(self, *exc: object) -> None:
        if self._initialized:
            self.shutdown()

    def _run_hook(self, stage: str) -> None:
        hook = self._hooks.get(stage)
        if hook is not None:
            hook(self)

    def on_initialize(self) -> None:
        """Run on initialization; raise to signal failure."""
        self._run_hook("initialize")

    def on_shutdown(self) -> None:
        """Run on shutdown."""
        self._run_hook("shutdown")

    def on_update(self) -> None:
        """Run once per frame while initialized."""
        self._run_hook("update")

    def on_render(self) -> None:
        """Run once per frame while initialized."""
        self._run_hook("render")