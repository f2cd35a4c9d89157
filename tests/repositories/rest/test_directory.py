from typing import Any, cast
from unittest.mock import Mock

import requests
import responses
from faker import Faker
from responses import matchers
from unittest_parametrize import ParametrizedTestCase, parametrize

from models import Employee
from repositories import SearchParseError, SearchServiceError, SearchTransportError
from repositories.rest import RestDirectoryRepository, TokenProvider


class TestDirectory(ParametrizedTestCase):
    def setUp(self) -> None:
        self.faker = Faker()
        self.base_url = self.faker.url().rstrip('/')
        self.repo = RestDirectoryRepository(self.base_url, None)
        self.query = self.faker.email()

    def search_matcher(self) -> list[Any]:
        return [matchers.query_param_matcher({'action': 'searchEmployees', 'query': self.query})]

    def gen_employee(self) -> Employee:
        return Employee(
            id=cast(str, self.faker.uuid4()),
            name=self.faker.name(),
            email=self.faker.email(),
            title=self.faker.job(),
            department=self.faker.word(),
        )

    def test_search_success(self) -> None:
        employees = [self.gen_employee() for _ in range(3)]

        with responses.RequestsMock() as rsps:
            rsps.get(
                self.base_url,
                match=self.search_matcher(),
                json={
                    'status': 'success',
                    'employees': [
                        {
                            'id': employee.id,
                            'name': employee.name,
                            'email': employee.email,
                            'title': employee.title,
                            'department': employee.department,
                        }
                        for employee in employees
                    ],
                },
            )

            result = self.repo.search(self.query)

        self.assertEqual(result, employees)

    def test_search_casts_ids_and_ignores_extra_fields(self) -> None:
        with responses.RequestsMock() as rsps:
            rsps.get(
                self.base_url,
                match=self.search_matcher(),
                json={
                    'status': 'success',
                    'employees': [{'id': 42, 'name': 'Jane Doe', 'email': 'jane@x.com', 'row': 7}],
                },
            )

            result = self.repo.search(self.query)

        self.assertEqual(result, [Employee(id='42', name='Jane Doe', email='jane@x.com')])

    def test_search_blank_optional_fields(self) -> None:
        with responses.RequestsMock() as rsps:
            rsps.get(
                self.base_url,
                match=self.search_matcher(),
                json={
                    'status': 'success',
                    'employees': [{'id': '1', 'name': 'Jane Doe', 'email': 'jane@x.com', 'title': None, 'department': None}],
                },
            )

            result = self.repo.search(self.query)

        self.assertEqual(result, [Employee(id='1', name='Jane Doe', email='jane@x.com')])
        self.assertEqual(result[0].title, '')
        self.assertEqual(result[0].department, '')

    def test_search_null_required_field(self) -> None:
        with responses.RequestsMock() as rsps:
            rsps.get(
                self.base_url,
                json={'status': 'success', 'employees': [{'id': None, 'name': 'Jane Doe', 'email': 'jane@x.com'}]},
            )

            with self.assertRaises(SearchParseError):
                self.repo.search(self.query)

    @parametrize(
        'body',
        [
            ({'status': 'success', 'employees': []},),
            ({'status': 'success'},),
        ],
    )
    def test_search_no_match(self, body: dict[str, Any]) -> None:
        with responses.RequestsMock() as rsps:
            rsps.get(self.base_url, match=self.search_matcher(), json=body)

            result = self.repo.search(self.query)

        self.assertEqual(result, [])

    def test_search_service_error(self) -> None:
        message = self.faker.sentence()

        with responses.RequestsMock() as rsps:
            rsps.get(self.base_url, json={'status': 'error', 'message': message})

            with self.assertRaises(SearchServiceError) as ctx:
                self.repo.search(self.query)

        self.assertEqual(ctx.exception.service_message, message)
        self.assertEqual(ctx.exception.message, f'Directory service error: {message}')

    def test_search_service_error_without_message(self) -> None:
        with responses.RequestsMock() as rsps:
            rsps.get(self.base_url, json={'status': 'error'})

            with self.assertRaises(SearchServiceError) as ctx:
                self.repo.search(self.query)

        self.assertEqual(ctx.exception.message, 'Directory service error: Unknown error')

    @parametrize(
        'body',
        [
            ('<html>Sign in</html>',),
            ('[1, 2, 3]',),
            ('{"status": "success", "employees": {"id": "1"}}',),
            ('{"status": "success", "employees": ["jane@x.com"]}',),
            ('{"status": "success", "employees": [{"name": "Jane Doe"}]}',),
        ],
    )
    def test_search_malformed_body(self, body: str) -> None:
        with responses.RequestsMock() as rsps:
            rsps.get(self.base_url, body=body, content_type='application/json')

            with self.assertRaises(SearchParseError):
                self.repo.search(self.query)

    @parametrize(
        'status',
        [
            (404,),
            (500,),
            (503,),
        ],
    )
    def test_search_http_error(self, status: int) -> None:
        with responses.RequestsMock() as rsps:
            rsps.get(self.base_url, status=status, json={'status': 'success', 'employees': []})

            with self.assertRaises(SearchTransportError):
                self.repo.search(self.query)

    def test_search_connection_error(self) -> None:
        with responses.RequestsMock() as rsps:
            rsps.get(self.base_url, body=requests.ConnectionError('unreachable'))

            with self.assertRaises(SearchTransportError):
                self.repo.search(self.query)

    def test_search_without_token_provider(self) -> None:
        with responses.RequestsMock() as rsps:
            rsps.get(self.base_url, json={'status': 'success', 'employees': []})
            self.repo.search(self.query)
            self.assertNotIn('Authorization', rsps.calls[0].request.headers)

    def test_search_with_token_provider(self) -> None:
        token = self.faker.pystr()
        token_provider = Mock(TokenProvider)
        cast(Mock, token_provider.get_token).return_value = token

        repo = RestDirectoryRepository(self.base_url, token_provider)

        with responses.RequestsMock() as rsps:
            rsps.get(self.base_url, json={'status': 'success', 'employees': []})
            repo.search(self.query)
            self.assertEqual(rsps.calls[0].request.headers['Authorization'], f'Bearer {token}')
