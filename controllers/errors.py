from models import Category, FormPhase


class OffboardingError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidTransitionError(OffboardingError):
    def __init__(self, action: str, phase: FormPhase) -> None:
        super().__init__(f'Cannot {action} while the form is {phase.value}.')
        self.action = action
        self.phase = phase


class NoEmployeeSelectedError(OffboardingError):
    def __init__(self) -> None:
        super().__init__('Select an employee before submitting.')


class FormIncompleteError(OffboardingError):
    def __init__(self, missing: list[str]) -> None:
        super().__init__(f'Required fields are missing: {", ".join(missing)}.')
        self.missing = missing


class UnknownOptionError(OffboardingError):
    def __init__(self, category: Category, option_id: str) -> None:
        super().__init__(f'Unknown {category.value} option: {option_id}.')
        self.category = category
        self.option_id = option_id


class SelectAllUnavailableError(OffboardingError):
    def __init__(self, category: Category) -> None:
        super().__init__(f'Select all is not available for {category.value}.')
        self.category = category


class UnknownReasonError(OffboardingError):
    def __init__(self, reason: str) -> None:
        super().__init__(f'Unknown offboarding reason: {reason}.')
        self.reason = reason


class UnknownEmployeeError(OffboardingError):
    def __init__(self, employee_id: str) -> None:
        super().__init__(f'Employee {employee_id} is not among the current search results.')
        self.employee_id = employee_id
