from dataclasses import dataclass
from enum import Enum

from .employee import Employee
from .form import FormPhase, OffboardingForm, SearchStatus
from .submission import Confirmation


class SearchPanel(Enum):
    HIDDEN = 'hidden'
    LOADING = 'loading'
    ERROR = 'error'
    HINT = 'hint'
    RESULTS = 'results'
    NO_RESULTS = 'no_results'


@dataclass(frozen=True)
class FormSnapshot:
    """Point-in-time copy of the controller state, safe to render outside the controller lock."""

    phase: FormPhase
    query: str
    employees: tuple[Employee, ...]
    search_status: SearchStatus
    search_error: str | None
    selected_employee: Employee | None
    form: OffboardingForm
    submit_error: str | None
    confirmation: Confirmation | None
    min_query_length: int

    @property
    def search_panel(self) -> SearchPanel:
        if not self.query or self.selected_employee is not None:
            return SearchPanel.HIDDEN
        if self.search_status is SearchStatus.LOADING:
            return SearchPanel.LOADING
        if self.search_status is SearchStatus.ERROR:
            return SearchPanel.ERROR
        if len(self.query.strip()) < self.min_query_length:
            return SearchPanel.HINT
        if self.employees:
            return SearchPanel.RESULTS
        return SearchPanel.NO_RESULTS

    @property
    def search_message(self) -> str | None:
        panel = self.search_panel
        if panel is SearchPanel.ERROR:
            return self.search_error
        if panel is SearchPanel.HINT:
            return f'Type at least {self.min_query_length} characters of the email address to search'
        if panel is SearchPanel.NO_RESULTS:
            return f'No employees found matching "{self.query}". Make sure the employee has been onboarded first'
        return None
