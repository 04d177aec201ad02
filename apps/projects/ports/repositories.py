# apps/projects/ports/repositories.py
from abc import ABC, abstractmethod
from typing import List


class IProjectProgressRepository(ABC):
    @abstractmethod
    def get_completion_flags(self, project_id: int) -> List[bool]:
        """Zwraca flagę `completed` każdego zadania przypisanego do projektu."""
        pass

    @abstractmethod
    def set_progress(self, project_id: int, progress: int) -> None:
        """
        Zapisuje postęp projektu.
        Rzuca ProjectNotFound, jeśli projekt nie istnieje.
        """
        pass
