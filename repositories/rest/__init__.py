from .base import RestBaseRepository
from .directory import RestDirectoryRepository
from .submission import RestSubmissionRepository
from .util import StaticTokenProvider, TokenProvider

__all__ = [
    'RestBaseRepository',
    'RestDirectoryRepository',
    'RestSubmissionRepository',
    'StaticTokenProvider',
    'TokenProvider',
]
