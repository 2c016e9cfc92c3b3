from functools import cached_property
from typing import Any

import reactivex
from reactivex.subject import Subject
from reactivex.subject.behaviorsubject import BehaviorSubject

from fibspiral.runtime.controls import ControlAction


class RuntimeSignals:
    """Per-frame streams shared between the loop and state providers.

    Subjects emit synchronously on the loop thread, so subscribers observe each
    value before the emitting call returns.
    """

    @cached_property
    def game_tick(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    @cached_property
    def controls(self) -> reactivex.Subject[ControlAction]:
        return Subject[ControlAction]()
