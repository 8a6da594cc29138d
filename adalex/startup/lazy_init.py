"""
adalex Lazy Initialization
==========================

Deferred, build-once initialization for process-wide read-only data such as
the lexical grammar table. The first access builds the value under a lock,
every later access returns the same object without locking.
"""

import time
import logging
import threading
from typing import Callable, Dict, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LazyComponent(Generic[T]):
    """
    Wrapper for a lazily built, immutable component.

    The init function runs at most once, even when several threads ask for
    the component at the same time.
    """

    def __init__(self, component_name: str, init_function: Callable[[], T]):
        self.component_name = component_name
        self.init_function = init_function
        self._instance: Optional[T] = None
        self._is_initialized = False
        self._initialization_time_ms = 0.0
        self._lock = threading.Lock()

        LazyRegistry.register(self)

    @property
    def is_initialized(self) -> bool:
        """Check if component is initialized"""
        return self._is_initialized

    @property
    def initialization_time_ms(self) -> float:
        """Get time taken to initialize component"""
        return self._initialization_time_ms

    def get_instance(self) -> T:
        """Get component instance, initializing if necessary"""
        if not self._is_initialized:
            with self._lock:
                if not self._is_initialized:  # Double-checked locking
                    start_time = time.perf_counter()

                    logger.debug("Building %s", self.component_name)
                    self._instance = self.init_function()

                    self._initialization_time_ms = (time.perf_counter() - start_time) * 1000
                    self._is_initialized = True

                    logger.debug(
                        "%s built in %.1fms", self.component_name, self._initialization_time_ms
                    )

        return self._instance

    def force_initialize(self) -> None:
        """Force initialization without returning instance"""
        self.get_instance()


class LazyRegistry:
    """Keeps track of the lazy components of the process, by name."""

    _components: Dict[str, LazyComponent] = {}
    _lock = threading.Lock()

    @classmethod
    def register(cls, component: LazyComponent) -> None:
        with cls._lock:
            cls._components[component.component_name] = component

    @classmethod
    def initialize_all(cls) -> None:
        """Eagerly build every registered component (e.g. at application start)."""
        with cls._lock:
            components = list(cls._components.values())
        for component in components:
            component.force_initialize()
