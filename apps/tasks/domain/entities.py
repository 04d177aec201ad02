# apps/tasks/domain/entities.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TaskPriority(str, Enum):
    LOW = 'LOW'
    MEDIUM = 'MEDIUM'
    HIGH = 'HIGH'

    @property
    def rank(self) -> int:
        """Do sortowania: HIGH > MEDIUM > LOW."""
        return {'LOW': 1, 'MEDIUM': 2, 'HIGH': 3}[self.value]


@dataclass(frozen=True)
class TaskSnapshot:
    """Stan zadania istotny dla postępu projektu (przed lub po zapisie)."""
    project_id: Optional[int]
    completed: bool = False
