from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    email: str
    title: str = ''
    department: str = ''

    @property
    def initials(self) -> str:
        return ''.join(part[0] for part in self.name.split())

    @property
    def details(self) -> str:
        return f'{self.title} • {self.department}'
