"""Obliczanie postępu projektu: czysta matematyka, wybór projektów, recalculator."""

import pytest

from apps.projects.adapters.orm_repositories import DjangoProjectProgressRepository
from apps.projects.domain.exceptions import ProjectNotFound, ProgressRecalculationError
from apps.projects.domain.progress import compute_progress
from apps.projects.ports.repositories import IProjectProgressRepository
from apps.projects.services.progress_service import ProgressRecalculator
from apps.tasks.domain.entities import TaskSnapshot
from apps.tasks.domain.services import projects_to_recalculate


class InMemoryProgressRepository(IProjectProgressRepository):
    def __init__(self, tasks=None):
        # {project_id: [completed, ...]}
        self.tasks = tasks or {}
        self.progress = {pid: 0 for pid in self.tasks}
        self.writes = []

    def get_completion_flags(self, project_id):
        return list(self.tasks.get(project_id, []))

    def set_progress(self, project_id, progress):
        if project_id not in self.progress:
            raise ProjectNotFound(project_id)
        self.writes.append((project_id, progress))
        self.progress[project_id] = progress


class TestComputeProgress:

    @pytest.mark.parametrize('flags, expected', [
        ([True, True, False], 67),
        ([False, False, False], 0),
        ([True], 100),
        ([], 0),
        ([True, False, False], 33),
        ([True] + [False] * 7, 13),
        ([True, False], 50),
    ])
    def test_percentage(self, flags, expected):
        assert compute_progress(flags) == expected

    def test_accepts_generator(self):
        assert compute_progress(flag for flag in [True, True]) == 100

    def test_result_in_bounds(self):
        for done in range(0, 11):
            value = compute_progress([True] * done + [False] * (10 - done))
            assert 0 <= value <= 100


class TestProjectsToRecalculate:

    def test_create_with_project(self):
        assert projects_to_recalculate(None, TaskSnapshot(project_id=1)) == {1}

    def test_create_without_project(self):
        assert projects_to_recalculate(None, TaskSnapshot(project_id=None)) == set()

    def test_delete_with_project(self):
        assert projects_to_recalculate(TaskSnapshot(project_id=4, completed=True), None) == {4}

    def test_delete_without_project(self):
        assert projects_to_recalculate(TaskSnapshot(project_id=None), None) == set()

    def test_update_irrelevant_fields(self):
        before = TaskSnapshot(project_id=2, completed=False)
        after = TaskSnapshot(project_id=2, completed=False)
        assert projects_to_recalculate(before, after) == set()

    def test_toggle_completed(self):
        before = TaskSnapshot(project_id=2, completed=False)
        after = TaskSnapshot(project_id=2, completed=True)
        assert projects_to_recalculate(before, after) == {2}

    def test_move_between_projects(self):
        before = TaskSnapshot(project_id=1, completed=True)
        after = TaskSnapshot(project_id=2, completed=True)
        assert projects_to_recalculate(before, after) == {1, 2}

    def test_detach_from_project(self):
        before = TaskSnapshot(project_id=1, completed=True)
        after = TaskSnapshot(project_id=None, completed=True)
        assert projects_to_recalculate(before, after) == {1}

    def test_nothing(self):
        assert projects_to_recalculate(None, None) == set()


class TestProgressRecalculator:

    def test_recalculate_writes_value(self):
        repo = InMemoryProgressRepository({1: [True, True, False]})
        service = ProgressRecalculator(repo)

        assert service.recalculate(1) == 67
        assert repo.progress[1] == 67

    def test_recalculate_is_idempotent(self):
        repo = InMemoryProgressRepository({1: [True, False]})
        service = ProgressRecalculator(repo)

        first = service.recalculate(1)
        second = service.recalculate(1)

        assert first == second == 50
        # Zapis następuje zawsze, także bez zmiany wartości
        assert repo.writes == [(1, 50), (1, 50)]

    def test_project_without_tasks(self):
        repo = InMemoryProgressRepository({7: []})
        assert ProgressRecalculator(repo).recalculate(7) == 0

    def test_missing_project_raises(self):
        service = ProgressRecalculator(InMemoryProgressRepository())
        with pytest.raises(ProjectNotFound) as exc:
            service.recalculate(99)
        assert exc.value.project_id == 99
        assert isinstance(exc.value, ProgressRecalculationError)

    def test_recalculate_many_deduplicates(self):
        repo = InMemoryProgressRepository({1: [True], 2: [False]})
        ProgressRecalculator(repo).recalculate_many([1, 2, 1])

        assert sorted(repo.writes) == [(1, 100), (2, 0)]


@pytest.mark.django_db
class TestDjangoProjectProgressRepository:

    def test_reads_flags_and_stores_progress(self, make_project, make_task):
        project = make_project()
        make_task(project=project, completed=True)
        make_task(project=project, completed=False)
        make_task(completed=True)  # bez projektu

        repo = DjangoProjectProgressRepository()
        assert sorted(repo.get_completion_flags(project.id)) == [False, True]

        repo.set_progress(project.id, 42)
        project.refresh_from_db()
        assert project.progress == 42

    def test_set_progress_unknown_project(self, db):
        with pytest.raises(ProjectNotFound):
            DjangoProjectProgressRepository().set_progress(12345, 10)

    def test_recalculator_with_orm(self, make_project, make_task):
        project = make_project()
        for completed in (True, False, False, False, False, False, False, False):
            make_task(project=project, completed=completed)

        # Ręczne popsucie wartości, żeby sprawdzić zapis
        type(project).objects.filter(pk=project.pk).update(progress=99)

        service = ProgressRecalculator(DjangoProjectProgressRepository())
        assert service.recalculate(project.id) == 13
        project.refresh_from_db()
        assert project.progress == 13
