"""
Per-form UI state: field errors, form-level banner and submission progress.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Dict, List


class SubmissionState(Enum):
    """Progress of the current submission."""
    IDLE = auto()
    SUBMITTING = auto()
    SUCCESS = auto()
    FAILED = auto()


StateListener = Callable[['FormState'], None]


@dataclass
class FormState:
    """
    Everything a form renders besides its input values.

    Listeners are called whenever the loading flag changes so a view can
    enable or disable the submit control.
    """
    field_errors: Dict[str, str] = field(default_factory=dict)
    error: str = ""
    success: bool = False
    submission: SubmissionState = SubmissionState.IDLE
    loading: bool = False
    _listeners: List[StateListener] = field(default_factory=list, repr=False, compare=False)

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    @property
    def is_submitting(self) -> bool:
        return self.submission is SubmissionState.SUBMITTING

    def begin_submission(self) -> None:
        self.submission = SubmissionState.SUBMITTING
        self._set_loading(True)

    def settle(self, succeeded: bool) -> None:
        self.submission = SubmissionState.SUCCESS if succeeded else SubmissionState.FAILED

    def end_submission(self) -> None:
        # Reached from a finally block; a still-pending state means an unexpected exception
        if self.submission is SubmissionState.SUBMITTING:
            self.submission = SubmissionState.FAILED
        self._set_loading(False)

    def clear_errors(self) -> None:
        self.field_errors = {}
        self.error = ""

    def _set_loading(self, value: bool) -> None:
        self.loading = value
        for listener in list(self._listeners):
            listener(self)
