from models import SubmissionRecord


class SubmissionRepository:
    def submit(self, record: SubmissionRecord) -> None:
        raise NotImplementedError  # pragma: no cover
