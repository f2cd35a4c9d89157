from .debounce import Debouncer, thread_timer
from .errors import (
    FormIncompleteError,
    InvalidTransitionError,
    NoEmployeeSelectedError,
    OffboardingError,
    SelectAllUnavailableError,
    UnknownEmployeeError,
    UnknownOptionError,
    UnknownReasonError,
)
from .offboarding import OffboardingFormController

__all__ = [
    'Debouncer',
    'FormIncompleteError',
    'InvalidTransitionError',
    'NoEmployeeSelectedError',
    'OffboardingError',
    'OffboardingFormController',
    'SelectAllUnavailableError',
    'UnknownEmployeeError',
    'UnknownOptionError',
    'UnknownReasonError',
    'thread_timer',
]
