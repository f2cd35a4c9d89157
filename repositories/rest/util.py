from typing import Protocol


class TokenProvider(Protocol):
    def get_token(self) -> str: ...


class StaticTokenProvider:
    def __init__(self, token: str) -> None:
        self.token = token

    def get_token(self) -> str:
        return self.token
