from unittest_parametrize import ParametrizedTestCase, parametrize

from models import DEFAULT_CATALOGS, Category, OffboardingForm


class TestOffboardingForm(ParametrizedTestCase):
    def test_defaults(self) -> None:
        form = OffboardingForm()

        self.assertEqual(form.last_working_day, '')
        self.assertEqual(form.offboarding_reason, '')
        self.assertEqual(form.licenses_to_revoke, [])
        self.assertEqual(form.permissions_to_remove, [])
        self.assertEqual(form.equipment_to_return, [])
        self.assertEqual(form.forward_email_to, '')
        self.assertTrue(form.revoke_vpn)
        self.assertTrue(form.revoke_building)
        self.assertTrue(form.archive_mailbox)
        self.assertEqual(form.notes, '')

    def test_defaults_are_not_shared(self) -> None:
        first = OffboardingForm()
        first.toggle(Category.LICENSES, 'm365-e3')

        self.assertEqual(OffboardingForm().licenses_to_revoke, [])

    @parametrize(
        ('category', 'option_id'),
        [
            (Category.LICENSES, 'm365-e3'),
            (Category.PERMISSIONS, 'd365-admin'),
            (Category.EQUIPMENT, 'laptop'),
        ],
    )
    def test_double_toggle_restores_selection(self, category: Category, option_id: str) -> None:
        form = OffboardingForm()
        form.replace_selection(category, DEFAULT_CATALOGS.ids(category)[-2:])
        before = list(form.selection(category))

        form.toggle(category, option_id)
        form.toggle(category, option_id)

        self.assertEqual(sorted(form.selection(category)), sorted(before))

    def test_toggle_keeps_insertion_order(self) -> None:
        form = OffboardingForm()
        form.toggle(Category.EQUIPMENT, 'keys')
        form.toggle(Category.EQUIPMENT, 'laptop')
        form.toggle(Category.EQUIPMENT, 'badge')
        form.toggle(Category.EQUIPMENT, 'laptop')

        self.assertEqual(form.equipment_to_return, ['keys', 'badge'])

    @parametrize(
        ('last_working_day', 'offboarding_reason', 'missing'),
        [
            ('', '', ['last_working_day', 'offboarding_reason']),
            ('2024-01-15', '', ['offboarding_reason']),
            ('', 'Layoff', ['last_working_day']),
            ('2024-01-15', 'Layoff', []),
        ],
    )
    def test_missing_required(self, last_working_day: str, offboarding_reason: str, missing: list[str]) -> None:
        form = OffboardingForm(last_working_day=last_working_day, offboarding_reason=offboarding_reason)

        self.assertEqual(form.missing_required, missing)
