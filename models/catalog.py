from dataclasses import dataclass, field
from enum import Enum


class Category(Enum):
    LICENSES = 'licenses'
    PERMISSIONS = 'permissions'
    EQUIPMENT = 'equipment'


@dataclass(frozen=True)
class CatalogOption:
    id: str
    name: str
    icon: str | None = None


@dataclass(frozen=True)
class Catalogs:
    licenses: tuple[CatalogOption, ...]
    permissions: tuple[CatalogOption, ...]
    equipment: tuple[CatalogOption, ...]
    reasons: tuple[str, ...]
    select_all: frozenset[Category] = field(default=frozenset({Category.LICENSES, Category.PERMISSIONS}))

    def options(self, category: Category) -> tuple[CatalogOption, ...]:
        return {
            Category.LICENSES: self.licenses,
            Category.PERMISSIONS: self.permissions,
            Category.EQUIPMENT: self.equipment,
        }[category]

    def ids(self, category: Category) -> list[str]:
        return [option.id for option in self.options(category)]

    def names(self, category: Category, ids: list[str]) -> list[str]:
        by_id = {option.id: option.name for option in self.options(category)}
        return [by_id[option_id] for option_id in ids if option_id in by_id]


M365_LICENSES = (
    CatalogOption('m365-e3', 'Microsoft 365 E3'),
    CatalogOption('m365-e5', 'Microsoft 365 E5'),
    CatalogOption('m365-f3', 'Microsoft 365 F3'),
    CatalogOption('o365-e1', 'Office 365 E1'),
    CatalogOption('exchange-p1', 'Exchange Online Plan 1'),
    CatalogOption('project-p3', 'Project Plan 3'),
    CatalogOption('visio-p2', 'Visio Plan 2'),
    CatalogOption('powerbi-pro', 'Power BI Pro'),
)

D365_PERMISSIONS = (
    CatalogOption('d365-team', 'Team Member'),
    CatalogOption('d365-operations', 'Operations'),
    CatalogOption('d365-finance', 'Finance'),
    CatalogOption('d365-hr', 'Human Resources'),
    CatalogOption('d365-admin', 'Administrator'),
    CatalogOption('d365-developer', 'Developer'),
)

EQUIPMENT_ITEMS = (
    CatalogOption('laptop', 'Laptop/Computer', '💻'),
    CatalogOption('mobile', 'Mobile Phone', '📱'),
    CatalogOption('badge', 'Access Badge/ID Card', '🪪'),
    CatalogOption('keys', 'Office Keys', '🔑'),
    CatalogOption('monitor', 'Monitor(s)', '🖥️'),
    CatalogOption('keyboard', 'Keyboard & Mouse', '⌨️'),
    CatalogOption('headset', 'Headset', '🎧'),
    CatalogOption('other', 'Other Equipment', '📦'),
)

OFFBOARDING_REASONS = (
    'Resignation',
    'Retirement',
    'Contract End',
    'Termination',
    'Transfer to Another Entity',
    'Layoff',
    'Other',
)

DEFAULT_CATALOGS = Catalogs(
    licenses=M365_LICENSES,
    permissions=D365_PERMISSIONS,
    equipment=EQUIPMENT_ITEMS,
    reasons=OFFBOARDING_REASONS,
)
