from typing import Any, NoReturn

import requests

from .util import TokenProvider


class RestBaseRepository:
    def __init__(self, base_url: str, token_provider: TokenProvider | None, timeout: float | None = None) -> None:
        self.base_url = base_url
        self.token_provider = token_provider
        self.timeout = timeout

    def auth_headers(self) -> dict[str, str]:
        if self.token_provider is None:
            return {}

        return {'Authorization': f'Bearer {self.token_provider.get_token()}'}

    def authenticated_get(self, url: str, params: dict[str, str] | None = None) -> requests.Response:
        return requests.get(url, params=params, headers=self.auth_headers(), timeout=self.timeout)

    def authenticated_post(self, url: str, body: dict[str, Any], **kwargs: Any) -> requests.Response:  # noqa: ANN401
        return requests.post(url, json=body, headers=self.auth_headers(), timeout=self.timeout, **kwargs)

    def unexpected_error(self, resp: requests.Response) -> NoReturn:
        resp.raise_for_status()
        raise requests.HTTPError(f'Unexpected response from server: {resp.status_code}', response=resp)
