import logging

import requests

from models import SubmissionRecord
from repositories import SubmissionRepository, SubmitTransportError

from .base import RestBaseRepository
from .util import TokenProvider

logger = logging.getLogger(__name__)


def record_to_dict(record: SubmissionRecord) -> dict[str, str]:
    return {
        'formType': record.form_type,
        'timestamp': record.timestamp,
        'employeeName': record.employee_name,
        'employeeEmail': record.employee_email,
        'employeeDepartment': record.employee_department,
        'employeeTitle': record.employee_title,
        'lastWorkingDay': record.last_working_day,
        'offboardingReason': record.offboarding_reason,
        'forwardEmailTo': record.forward_email_to,
        'licensesToRevoke': record.licenses_to_revoke,
        'permissionsToRemove': record.permissions_to_remove,
        'equipmentToReturn': record.equipment_to_return,
        'revokeVPN': record.revoke_vpn,
        'revokeBuilding': record.revoke_building,
        'archiveMailbox': record.archive_mailbox,
        'notes': record.notes,
    }


class RestSubmissionRepository(SubmissionRepository, RestBaseRepository):
    def __init__(self, base_url: str, token_provider: TokenProvider | None, timeout: float | None = None) -> None:
        RestBaseRepository.__init__(self, base_url, token_provider, timeout)

    def submit(self, record: SubmissionRecord) -> None:
        data = record_to_dict(record)
        logger.debug('Submitting offboarding record: %s', data)

        # The webhook answers with a redirect we never read; delivery is assumed once the request goes out.
        try:
            resp = self.authenticated_post(self.base_url, data, allow_redirects=False)
        except requests.RequestException as err:
            logger.exception('Offboarding submission for %s failed', record.employee_email)
            raise SubmitTransportError from err

        logger.debug('Webhook answered submission with status %s', resp.status_code)
