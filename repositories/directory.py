from models import Employee


class DirectoryRepository:
    def search(self, query: str) -> list[Employee]:
        raise NotImplementedError  # pragma: no cover
