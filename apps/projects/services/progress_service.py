# apps/projects/services/progress_service.py
import logging
from typing import Iterable
from apps.projects.domain.progress import compute_progress
from apps.projects.ports.repositories import IProjectProgressRepository

logger = logging.getLogger(__name__)


class ProgressRecalculator:
    """
    Przelicza postęp projektu na podstawie jego zadań.

    Operacja jest idempotentna: kolejne wywołanie przy niezmienionych
    zadaniach daje ten sam wynik, więc ponowienie po błędzie jest bezpieczne.
    """

    def __init__(self, repository: IProjectProgressRepository):
        self.repository = repository

    def recalculate(self, project_id: int) -> int:
        # 1. Pobierz flagi ukończenia zadań projektu
        flags = self.repository.get_completion_flags(project_id)

        # 2. Oblicz procent
        progress = compute_progress(flags)

        # 3. Zapisz zawsze (nawet jeśli wartość się nie zmieniła)
        self.repository.set_progress(project_id, progress)

        logger.debug("Project %s progress: %s%% (%s tasks)", project_id, progress, len(flags))
        return progress

    def recalculate_many(self, project_ids: Iterable[int]) -> None:
        """Każdy projekt osobno; brak atomowości dla całego zbioru."""
        for project_id in set(project_ids):
            self.recalculate(project_id)
