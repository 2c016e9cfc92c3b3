import time
from typing import Generic, TypeVar, final

import pygame
from reactivex import Observable
from reactivex.disposable import Disposable

from fibspiral.renderers.state_provider import (ObservableProvider,
                                                StaticStateProvider)
from fibspiral.utilities.logging import get_logger

logger = get_logger(__name__)

StateT = TypeVar("StateT")


class StatefulBaseRenderer(Generic[StateT]):
    """Renderer that draws the latest immutable state snapshot from a provider."""

    def __init__(
        self,
        builder: ObservableProvider[StateT] | None = None,
        *,
        state: StateT | None = None,
    ) -> None:
        if builder is not None and state is not None:
            raise ValueError("StatefulBaseRenderer expects either builder or state")
        if builder is None and state is not None:
            builder = StaticStateProvider(state)
        if builder is None:
            raise ValueError("StatefulBaseRenderer requires a builder or state")
        self.builder = builder
        self.initialized = False
        self.warmup = True
        self._state: StateT | None = None
        self._subscription: Disposable | None = None

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @property
    def state(self) -> StateT:
        assert self._state is not None
        return self._state

    def set_state(self, state: StateT) -> None:
        self._state = state

    def is_initialized(self) -> bool:
        return self.initialized

    def state_observable(self) -> Observable[StateT]:
        return self.builder.observable()

    def initialize(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        self._subscription = self.state_observable().subscribe(on_next=self.set_state)
        if self._state is None:
            raise RuntimeError(f"{self.name} provider did not emit an initial state")
        # Draw once up front so the first real frame does not pay for warm-up.
        if self.warmup:
            self.real_process(window=window, clock=clock)
        self.initialized = True

    @final
    def process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        if not self.is_initialized():
            raise ValueError("Needs to be initialized")

        start_ns = time.perf_counter_ns()
        self.real_process(window=window, clock=clock)
        duration_ms = (time.perf_counter_ns() - start_ns) / 1_000_000
        logger.debug(
            "renderer.frame",
            extra={
                "renderer": self.name,
                "duration_ms": duration_ms,
            },
        )

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        raise NotImplementedError("Please implement")

    def reset(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        self.initialized = False
