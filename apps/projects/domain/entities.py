# apps/projects/domain/entities.py
from enum import Enum


class ProjectStatus(str, Enum):
    PLANNING = 'PLANNING'
    IN_PROGRESS = 'IN_PROGRESS'
    ON_HOLD = 'ON_HOLD'
    COMPLETED = 'COMPLETED'
    CANCELLED = 'CANCELLED'

    @classmethod
    def finished(cls):
        return [cls.COMPLETED, cls.CANCELLED]
