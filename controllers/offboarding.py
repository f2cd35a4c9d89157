import copy
import logging
import threading
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from models import (
    DEFAULT_CATALOGS,
    Catalogs,
    Category,
    Confirmation,
    Employee,
    FormPhase,
    FormSnapshot,
    OffboardingForm,
    SearchStatus,
    SubmissionRecord,
)
from repositories import DirectoryError, DirectoryRepository, SearchTransportError, SubmissionError, SubmissionRepository

from .debounce import Debouncer, TimerFactory, thread_timer
from .errors import (
    FormIncompleteError,
    InvalidTransitionError,
    NoEmployeeSelectedError,
    SelectAllUnavailableError,
    UnknownEmployeeError,
    UnknownOptionError,
    UnknownReasonError,
)

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.5
MIN_QUERY_LENGTH = 3

EDITABLE_FIELDS = frozenset(
    {
        'last_working_day',
        'offboarding_reason',
        'forward_email_to',
        'revoke_vpn',
        'revoke_building',
        'archive_mailbox',
        'notes',
    }
)

EDITING_PHASES = frozenset({FormPhase.SELECTED, FormPhase.FILLING, FormPhase.FAILED})
SEARCH_PHASES = EDITING_PHASES | {FormPhase.SEARCHING}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OffboardingFormController:
    """Drives one offboarding intake from employee search to confirmation.

    Phases move ``searching -> selected -> filling -> submitting`` and end in
    ``confirmed`` or ``failed``; a failed submission goes back to ``filling`` on
    the next edit or can be resubmitted directly. ``reset`` is the only way out
    of ``confirmed``.

    Search requests run on the debounce timer thread, so every state change
    happens under ``_lock`` and network calls happen outside it.
    """

    def __init__(  # noqa: PLR0913
        self,
        directory_repo: DirectoryRepository,
        submission_repo: SubmissionRepository,
        catalogs: Catalogs = DEFAULT_CATALOGS,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        min_query_length: int = MIN_QUERY_LENGTH,
        timer_factory: TimerFactory = thread_timer,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.directory_repo = directory_repo
        self.submission_repo = submission_repo
        self.catalogs = catalogs
        self.min_query_length = min_query_length
        self.clock = clock
        self._debouncer = Debouncer(debounce_seconds, timer_factory)
        self._lock = threading.RLock()
        self._search_seq = 0
        self._reset_state()

    def _reset_state(self) -> None:
        self.phase = FormPhase.SEARCHING
        self.query = ''
        self.employees: list[Employee] = []
        self.search_status = SearchStatus.IDLE
        self.search_error: str | None = None
        self.selected_employee: Employee | None = None
        self.form = OffboardingForm()
        self.submit_error: str | None = None
        self.confirmation: Confirmation | None = None

    def snapshot(self) -> FormSnapshot:
        with self._lock:
            return FormSnapshot(
                phase=self.phase,
                query=self.query,
                employees=tuple(self.employees),
                search_status=self.search_status,
                search_error=self.search_error,
                selected_employee=self.selected_employee,
                form=copy.deepcopy(self.form),
                submit_error=self.submit_error,
                confirmation=self.confirmation,
                min_query_length=self.min_query_length,
            )

    def _require_phase(self, action: str, allowed: frozenset[FormPhase]) -> None:
        if self.phase not in allowed:
            raise InvalidTransitionError(action, self.phase)

    # Search

    def set_query(self, query: str) -> None:
        with self._lock:
            self._require_phase('search', SEARCH_PHASES)
            self.query = query
            seq = self._invalidate_search()

            if len(query.strip()) < self.min_query_length:
                self._clear_results()
                return

            self._debouncer.call(lambda: self._run_search(query, seq))

    def _invalidate_search(self) -> int:
        self._search_seq += 1
        return self._search_seq

    def _clear_results(self) -> None:
        self._debouncer.cancel()
        self.employees = []
        self.search_status = SearchStatus.IDLE
        self.search_error = None

    def _run_search(self, query: str, seq: int) -> None:
        with self._lock:
            if seq != self._search_seq:
                return
            self.search_status = SearchStatus.LOADING
            self.search_error = None

        logger.debug('Searching employee directory for %r (request %d)', query, seq)

        try:
            employees = self.directory_repo.search(query)
        except DirectoryError as err:
            self._fail_search(seq, err.message)
            return
        except Exception:  # noqa: BLE001
            logger.exception('Employee search for %r failed unexpectedly', query)
            self._fail_search(seq, SearchTransportError.message)
            return

        with self._lock:
            if self._is_stale(seq):
                return
            self.employees = employees
            self.search_status = SearchStatus.READY

    def _fail_search(self, seq: int, message: str) -> None:
        with self._lock:
            if self._is_stale(seq):
                return
            self.employees = []
            self.search_status = SearchStatus.ERROR
            self.search_error = message

    def _is_stale(self, seq: int) -> bool:
        if seq == self._search_seq:
            return False

        logger.warning('Discarding stale employee search response %d (latest is %d)', seq, self._search_seq)
        return True

    def select_employee(self, employee_id: str) -> Employee:
        with self._lock:
            self._require_phase('select an employee', frozenset({FormPhase.SEARCHING}))

            employee = next((emp for emp in self.employees if emp.id == employee_id), None)
            if employee is None:
                raise UnknownEmployeeError(employee_id)

            self._invalidate_search()
            self._clear_results()
            self.query = ''
            self.selected_employee = employee
            self.phase = FormPhase.SELECTED
            return employee

    def clear_selection(self) -> None:
        with self._lock:
            self._require_phase('change the selected employee', EDITING_PHASES)
            self.selected_employee = None
            self.submit_error = None
            self.phase = FormPhase.SEARCHING

    # Form

    def _start_edit(self, action: str) -> None:
        self._require_phase(action, EDITING_PHASES)
        self.phase = FormPhase.FILLING

    def update_fields(self, **changes: Any) -> None:  # noqa: ANN401
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise TypeError(f'Unknown form fields: {", ".join(sorted(unknown))}')

        reason = changes.get('offboarding_reason')
        if reason and reason not in self.catalogs.reasons:
            raise UnknownReasonError(reason)

        with self._lock:
            self._start_edit('edit the form')
            for name, value in changes.items():
                setattr(self.form, name, value)

    def toggle(self, category: Category, option_id: str) -> None:
        if option_id not in self.catalogs.ids(category):
            raise UnknownOptionError(category, option_id)

        with self._lock:
            self._start_edit('edit the form')
            self.form.toggle(category, option_id)

    def select_all(self, category: Category) -> None:
        if category not in self.catalogs.select_all:
            raise SelectAllUnavailableError(category)

        with self._lock:
            self._start_edit('edit the form')
            self.form.replace_selection(category, self.catalogs.ids(category))

    # Submission

    def submit(self) -> FormPhase:
        with self._lock:
            if self.phase in (FormPhase.SUBMITTING, FormPhase.CONFIRMED):
                raise InvalidTransitionError('submit', self.phase)

            employee = self.selected_employee
            if employee is None:
                raise NoEmployeeSelectedError

            missing = self.form.missing_required
            if missing:
                raise FormIncompleteError(missing)

            form = copy.deepcopy(self.form)
            record = SubmissionRecord.build(employee, form, self.catalogs, self.clock())
            self.phase = FormPhase.SUBMITTING
            self.submit_error = None

        try:
            self.submission_repo.submit(record)
        except SubmissionError as err:
            return self._fail_submission(err.message)
        except Exception:  # noqa: BLE001
            logger.exception('Offboarding submission for %s failed unexpectedly', employee.email)
            return self._fail_submission(SubmissionError.message)

        logger.info('Offboarding request for %s submitted', employee.email)

        with self._lock:
            self.confirmation = Confirmation.build(employee, form)
            self.phase = FormPhase.CONFIRMED
            return self.phase

    def _fail_submission(self, message: str) -> FormPhase:
        with self._lock:
            self.phase = FormPhase.FAILED
            self.submit_error = message
            return self.phase

    def reset(self) -> None:
        with self._lock:
            self._require_phase('start a new offboarding', frozenset({FormPhase.CONFIRMED}))
            self._invalidate_search()
            self._debouncer.cancel()
            self._reset_state()
