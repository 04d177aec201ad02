from django.core.management.base import BaseCommand
from apps.projects.adapters.orm_repositories import DjangoProjectProgressRepository
from apps.projects.domain.exceptions import ProjectNotFound
from apps.projects.models import Project
from apps.projects.services.progress_service import ProgressRecalculator


class Command(BaseCommand):
    help = 'Przelicza postęp projektów na podstawie ich zadań'

    def add_arguments(self, parser):
        parser.add_argument('project_ids', nargs='*', type=int, help="ID projektów (domyślnie wszystkie)")

    def handle(self, *args, **options):
        project_ids = options['project_ids'] or list(Project.objects.values_list('id', flat=True))
        service = ProgressRecalculator(DjangoProjectProgressRepository())

        updated = 0
        for project_id in project_ids:
            try:
                progress = service.recalculate(project_id)
            except ProjectNotFound:
                self.stderr.write(self.style.WARNING(f"Projekt {project_id} nie istnieje, pomijam."))
                continue
            updated += 1
            self.stdout.write(f"- Projekt {project_id}: {progress}%")

        self.stdout.write(self.style.SUCCESS(f'Przeliczono postęp {updated} projektów.'))
