from .directory import DirectoryRepository
from .errors import (
    DirectoryError,
    SearchParseError,
    SearchServiceError,
    SearchTransportError,
    SubmissionError,
    SubmitTransportError,
)
from .submission import SubmissionRepository

__all__ = [
    'DirectoryError',
    'DirectoryRepository',
    'SearchParseError',
    'SearchServiceError',
    'SearchTransportError',
    'SubmissionError',
    'SubmissionRepository',
    'SubmitTransportError',
]
