from typing import Any

from dependency_injector.wiring import Provide
from flask import Blueprint, Response
from flask.views import MethodView

from containers import Container
from models import CatalogOption, Catalogs

from .util import class_route, json_response

blp = Blueprint('Catalogs', __name__)


def option_to_dict(option: CatalogOption) -> dict[str, Any]:
    data = {'id': option.id, 'name': option.name}
    if option.icon is not None:
        data['icon'] = option.icon
    return data


def catalogs_to_dict(catalogs: Catalogs) -> dict[str, Any]:
    return {
        'licenses': [option_to_dict(option) for option in catalogs.licenses],
        'permissions': [option_to_dict(option) for option in catalogs.permissions],
        'equipment': [option_to_dict(option) for option in catalogs.equipment],
        'reasons': list(catalogs.reasons),
        'select_all': sorted(category.value for category in catalogs.select_all),
    }


@class_route(blp, '/api/v1/catalogs')
class CatalogList(MethodView):
    init_every_request = False

    def get(self, catalogs: Catalogs = Provide[Container.catalogs]) -> Response:
        return json_response(catalogs_to_dict(catalogs), 200)
