from dataclasses import asdict, dataclass, field
from typing import Any

import marshmallow
import marshmallow_dataclass
from dependency_injector.wiring import Provide
from flask import Blueprint, Response, request
from flask.views import MethodView

from containers import Container
from controllers import OffboardingFormController
from models import Category, Confirmation, Employee, FormPhase, FormSnapshot, OffboardingForm, SearchStatus

from .util import class_route, error_response, handles_offboarding_errors, json_response, validation_error_response

blp = Blueprint('Offboarding', __name__)

JSON_VALIDATION_ERROR = 'Request body must be a JSON object.'
DATE_PATTERN = r'^(\d{4}-\d{2}-\d{2})?$'


def employee_to_dict(employee: Employee) -> dict[str, Any]:
    return {
        'id': employee.id,
        'name': employee.name,
        'email': employee.email,
        'title': employee.title,
        'department': employee.department,
        'details': employee.details,
        'initials': employee.initials,
    }


def form_to_dict(form: OffboardingForm) -> dict[str, Any]:
    return asdict(form)


def confirmation_to_dict(confirmation: Confirmation) -> dict[str, Any]:
    return asdict(confirmation)


def snapshot_to_dict(snapshot: FormSnapshot) -> dict[str, Any]:
    return {
        'phase': snapshot.phase.value,
        'search': {
            'query': snapshot.query,
            'status': snapshot.search_status.value,
            'loading': snapshot.search_status is SearchStatus.LOADING,
            'panel': snapshot.search_panel.value,
            'message': snapshot.search_message,
            'employees': [employee_to_dict(employee) for employee in snapshot.employees],
        },
        'selected_employee': employee_to_dict(snapshot.selected_employee) if snapshot.selected_employee else None,
        'form': form_to_dict(snapshot.form),
        'submitting': snapshot.phase is FormPhase.SUBMITTING,
        'error': snapshot.submit_error,
        'confirmation': confirmation_to_dict(snapshot.confirmation) if snapshot.confirmation else None,
    }


@dataclass
class SearchBody:
    query: str


@dataclass
class EmployeeSelectionBody:
    id: str = field(metadata={'validate': [marshmallow.validate.Length(min=1)]})


@dataclass
class FormFieldsBody:
    last_working_day: str | None = field(default=None, metadata={'validate': [marshmallow.validate.Regexp(DATE_PATTERN)]})
    offboarding_reason: str | None = None
    forward_email_to: str | None = None
    revoke_vpn: bool | None = None
    revoke_building: bool | None = None
    archive_mailbox: bool | None = None
    notes: str | None = None


def load_body(body_class: type[Any]) -> tuple[Any, Response | None]:
    schema = marshmallow_dataclass.class_schema(body_class)()
    req_json = request.get_json(silent=True)
    if req_json is None:
        return None, error_response(JSON_VALIDATION_ERROR, 400)

    try:
        return schema.load(req_json), None
    except marshmallow.ValidationError as err:
        return None, validation_error_response(err)


def parse_category(raw: str) -> Category | None:
    try:
        return Category(raw)
    except ValueError:
        return None


def state_response(controller: OffboardingFormController, status: int = 200) -> Response:
    return json_response(snapshot_to_dict(controller.snapshot()), status)


@class_route(blp, '/api/v1/offboarding')
class OffboardingState(MethodView):
    init_every_request = False

    def get(self, controller: OffboardingFormController = Provide[Container.form_controller]) -> Response:
        return state_response(controller)

    @handles_offboarding_errors
    def delete(self, controller: OffboardingFormController = Provide[Container.form_controller]) -> Response:
        controller.reset()
        return state_response(controller)


@class_route(blp, '/api/v1/offboarding/search')
class OffboardingSearch(MethodView):
    init_every_request = False

    @handles_offboarding_errors
    def put(self, controller: OffboardingFormController = Provide[Container.form_controller]) -> Response:
        data, error = load_body(SearchBody)
        if error is not None:
            return error

        controller.set_query(data.query)
        return state_response(controller, 202)


@class_route(blp, '/api/v1/offboarding/employee')
class OffboardingEmployee(MethodView):
    init_every_request = False

    @handles_offboarding_errors
    def post(self, controller: OffboardingFormController = Provide[Container.form_controller]) -> Response:
        data, error = load_body(EmployeeSelectionBody)
        if error is not None:
            return error

        controller.select_employee(data.id)
        return state_response(controller)

    @handles_offboarding_errors
    def delete(self, controller: OffboardingFormController = Provide[Container.form_controller]) -> Response:
        controller.clear_selection()
        return state_response(controller)


@class_route(blp, '/api/v1/offboarding/form')
class OffboardingFormFields(MethodView):
    init_every_request = False

    @handles_offboarding_errors
    def patch(self, controller: OffboardingFormController = Provide[Container.form_controller]) -> Response:
        data, error = load_body(FormFieldsBody)
        if error is not None:
            return error

        changes = {name: value for name, value in asdict(data).items() if value is not None}
        controller.update_fields(**changes)
        return state_response(controller)


@class_route(blp, '/api/v1/offboarding/form/<category>/all')
class OffboardingSelectAll(MethodView):
    init_every_request = False

    @handles_offboarding_errors
    def post(
        self,
        category: str,
        controller: OffboardingFormController = Provide[Container.form_controller],
    ) -> Response:
        parsed = parse_category(category)
        if parsed is None:
            return error_response(f'Unknown category: {category}', 404)

        controller.select_all(parsed)
        return state_response(controller)


@class_route(blp, '/api/v1/offboarding/form/<category>/<option_id>')
class OffboardingToggle(MethodView):
    init_every_request = False

    @handles_offboarding_errors
    def post(
        self,
        category: str,
        option_id: str,
        controller: OffboardingFormController = Provide[Container.form_controller],
    ) -> Response:
        parsed = parse_category(category)
        if parsed is None:
            return error_response(f'Unknown category: {category}', 404)

        controller.toggle(parsed, option_id)
        return state_response(controller)


@class_route(blp, '/api/v1/offboarding/submission')
class OffboardingSubmission(MethodView):
    init_every_request = False

    @handles_offboarding_errors
    def post(self, controller: OffboardingFormController = Provide[Container.form_controller]) -> Response:
        phase = controller.submit()
        return state_response(controller, 201 if phase is FormPhase.CONFIRMED else 502)
