# apps/tasks/domain/services.py
from typing import Optional, Set
from apps.tasks.domain.entities import TaskSnapshot


def projects_to_recalculate(before: Optional[TaskSnapshot], after: Optional[TaskSnapshot]) -> Set[int]:
    """
    Zwraca ID projektów, których postęp trzeba przeliczyć po zmianie zadania.

    before=None -> zadanie utworzone, after=None -> zadanie usunięte.
    Aktualizacja liczy się tylko wtedy, gdy zmieniło się `completed`
    albo `project_id`; wtedy przeliczamy stary i nowy projekt.
    """
    if before is None and after is None:
        return set()

    # Tworzenie
    if before is None:
        return {after.project_id} if after.project_id else set()

    # Usuwanie
    if after is None:
        return {before.project_id} if before.project_id else set()

    # Aktualizacja (w tym toggle)
    if before.completed == after.completed and before.project_id == after.project_id:
        return set()

    return {pid for pid in (before.project_id, after.project_id) if pid}
