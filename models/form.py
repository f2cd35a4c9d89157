from dataclasses import dataclass, field
from enum import Enum

from .catalog import Category


class FormPhase(Enum):
    SEARCHING = 'searching'
    SELECTED = 'selected'
    FILLING = 'filling'
    SUBMITTING = 'submitting'
    CONFIRMED = 'confirmed'
    FAILED = 'failed'


class SearchStatus(Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    READY = 'ready'
    ERROR = 'error'


@dataclass
class OffboardingForm:
    """Offboarding decisions collected for the selected employee.

    The selection lists behave as insertion-ordered sets: the controller only
    adds ids that are absent and only removes ids that are present.
    """

    last_working_day: str = ''
    offboarding_reason: str = ''
    licenses_to_revoke: list[str] = field(default_factory=list)
    permissions_to_remove: list[str] = field(default_factory=list)
    equipment_to_return: list[str] = field(default_factory=list)
    forward_email_to: str = ''
    revoke_vpn: bool = True
    revoke_building: bool = True
    archive_mailbox: bool = True
    notes: str = ''

    def selection(self, category: Category) -> list[str]:
        return {
            Category.LICENSES: self.licenses_to_revoke,
            Category.PERMISSIONS: self.permissions_to_remove,
            Category.EQUIPMENT: self.equipment_to_return,
        }[category]

    def toggle(self, category: Category, option_id: str) -> None:
        selected = self.selection(category)
        if option_id in selected:
            selected.remove(option_id)
        else:
            selected.append(option_id)

    def replace_selection(self, category: Category, option_ids: list[str]) -> None:
        selected = self.selection(category)
        selected[:] = option_ids

    @property
    def missing_required(self) -> list[str]:
        missing = []
        if not self.last_working_day:
            missing.append('last_working_day')
        if not self.offboarding_reason:
            missing.append('offboarding_reason')
        return missing
