from .catalog import DEFAULT_CATALOGS, CatalogOption, Catalogs, Category
from .employee import Employee
from .form import FormPhase, OffboardingForm, SearchStatus
from .submission import Confirmation, SubmissionRecord
from .view import FormSnapshot, SearchPanel

__all__ = [
    'DEFAULT_CATALOGS',
    'CatalogOption',
    'Catalogs',
    'Category',
    'Confirmation',
    'Employee',
    'FormPhase',
    'FormSnapshot',
    'OffboardingForm',
    'SearchPanel',
    'SearchStatus',
    'SubmissionRecord',
]
