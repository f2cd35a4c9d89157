import json
from collections.abc import Callable
from typing import Any

import marshmallow
from flask import Blueprint, Response
from flask.views import MethodView
from tightwrap import wraps

from controllers import (
    InvalidTransitionError,
    OffboardingError,
    UnknownEmployeeError,
    UnknownOptionError,
)


def class_route(blueprint: Blueprint, rule: str, **options: Any) -> Callable[[type[MethodView]], type[MethodView]]:  # noqa: ANN401
    def decorator(cls: type[MethodView]) -> type[MethodView]:
        blueprint.add_url_rule(rule, view_func=cls.as_view(cls.__name__), **options)
        return cls

    return decorator


def json_response(data: dict[str, Any] | list[dict[str, Any]], status: int) -> Response:
    return Response(json.dumps(data), status=status, mimetype='application/json')


def error_response(msg: str, code: int) -> Response:
    return json_response({'message': msg, 'code': code}, code)


def validation_error_response(err: marshmallow.ValidationError) -> Response:
    if isinstance(err.messages, dict):
        # Report only the first failing field, with its first message
        field, messages = next(iter(err.messages.items()))
        detail = messages[0] if isinstance(messages, list) else str(messages)
        return error_response(f'Invalid value for {field}: {detail}', 400)

    return error_response(f'Invalid request body: {err.messages}', 400)


def offboarding_error_status(err: OffboardingError) -> int:
    if isinstance(err, InvalidTransitionError):
        return 409
    if isinstance(err, UnknownEmployeeError | UnknownOptionError):
        return 404
    return 400


def handles_offboarding_errors(f: Callable[..., Response]) -> Callable[..., Response]:
    @wraps(f)
    def decorated_function(*args, **kwargs) -> Response:  # type: ignore[no-untyped-def] # noqa: ANN002, ANN003
        try:
            return f(*args, **kwargs)
        except OffboardingError as err:
            return error_response(err.message, offboarding_error_status(err))

    return decorated_function
