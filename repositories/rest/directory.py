import logging
from typing import Any

import dacite
import requests

from models import Employee
from repositories import DirectoryRepository, SearchParseError, SearchServiceError, SearchTransportError

from .base import RestBaseRepository
from .util import TokenProvider

logger = logging.getLogger(__name__)

SEARCH_ACTION = 'searchEmployees'


class RestDirectoryRepository(DirectoryRepository, RestBaseRepository):
    def __init__(self, base_url: str, token_provider: TokenProvider | None, timeout: float | None = None) -> None:
        RestBaseRepository.__init__(self, base_url, token_provider, timeout)

    def search(self, query: str) -> list[Employee]:
        try:
            resp = self.authenticated_get(self.base_url, params={'action': SEARCH_ACTION, 'query': query})
            if not 200 <= resp.status_code < 300:  # noqa: PLR2004
                self.unexpected_error(resp)
        except requests.RequestException as err:
            logger.exception('Employee search for %r failed', query)
            raise SearchTransportError from err

        try:
            data = resp.json()
        except requests.JSONDecodeError as err:
            logger.exception('Employee search for %r returned a non-JSON body', query)
            raise SearchParseError from err

        if not isinstance(data, dict):
            raise SearchParseError

        if data.get('status') != 'success':
            raise SearchServiceError(data.get('message'))

        return self.parse_employees(data.get('employees') or [])

    def parse_employees(self, raw: Any) -> list[Employee]:  # noqa: ANN401
        if not isinstance(raw, list) or not all(isinstance(item, dict) for item in raw):
            raise SearchParseError

        # Blank spreadsheet cells arrive as null; drop them so optional fields keep their defaults
        items = [{key: value for key, value in item.items() if value is not None} for item in raw]

        try:
            return [dacite.from_dict(data_class=Employee, data=item, config=dacite.Config(cast=[str])) for item in items]
        except dacite.DaciteError as err:
            raise SearchParseError from err
