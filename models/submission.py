from dataclasses import dataclass
from datetime import datetime

from .catalog import Catalogs, Category
from .employee import Employee
from .form import OffboardingForm

FORM_TYPE = 'Offboarding'


def yes_no(value: bool) -> str:  # noqa: FBT001
    return 'Yes' if value else 'No'


def iso_timestamp(moment: datetime) -> str:
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass(frozen=True)
class SubmissionRecord:
    timestamp: str
    employee_name: str
    employee_email: str
    employee_department: str
    employee_title: str
    last_working_day: str
    offboarding_reason: str
    forward_email_to: str
    licenses_to_revoke: str
    permissions_to_remove: str
    equipment_to_return: str
    revoke_vpn: str
    revoke_building: str
    archive_mailbox: str
    notes: str
    form_type: str = FORM_TYPE

    @classmethod
    def build(cls, employee: Employee, form: OffboardingForm, catalogs: Catalogs, submitted_at: datetime) -> 'SubmissionRecord':
        def joined(category: Category) -> str:
            return ', '.join(catalogs.names(category, form.selection(category)))

        return cls(
            timestamp=iso_timestamp(submitted_at),
            employee_name=employee.name,
            employee_email=employee.email,
            employee_department=employee.department,
            employee_title=employee.title,
            last_working_day=form.last_working_day,
            offboarding_reason=form.offboarding_reason,
            forward_email_to=form.forward_email_to,
            licenses_to_revoke=joined(Category.LICENSES),
            permissions_to_remove=joined(Category.PERMISSIONS),
            equipment_to_return=joined(Category.EQUIPMENT),
            revoke_vpn=yes_no(form.revoke_vpn),
            revoke_building=yes_no(form.revoke_building),
            archive_mailbox=yes_no(form.archive_mailbox),
            notes=form.notes,
        )


@dataclass(frozen=True)
class Confirmation:
    employee_name: str
    employee_email: str
    last_working_day: str
    offboarding_reason: str
    license_count: int
    permission_count: int

    @classmethod
    def build(cls, employee: Employee, form: OffboardingForm) -> 'Confirmation':
        return cls(
            employee_name=employee.name,
            employee_email=employee.email,
            last_working_day=form.last_working_day,
            offboarding_reason=form.offboarding_reason,
            license_count=len(form.licenses_to_revoke),
            permission_count=len(form.permissions_to_remove),
        )
