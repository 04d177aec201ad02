from datetime import timedelta
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone
from apps.journal.models import DailyNote
from apps.knowledge.models import KnowledgeArticle
from apps.note_templates.models import Template
from apps.notes.models import Category, Tag, Note, NoteTag
from apps.projects.models import Project
from apps.tasks.models import Task


class Command(BaseCommand):
    help = 'Tworzy konto demo i przykładowe dane'

    def add_arguments(self, parser):
        parser.add_argument('--username', default='demo', help="Nazwa użytkownika demo")
        parser.add_argument('--password', default='demo', help="Hasło użytkownika demo")

    @transaction.atomic
    def handle(self, *args, **options):
        User = get_user_model()
        user, created = User.objects.get_or_create(username=options['username'])
        if not created:
            self.stdout.write(self.style.WARNING(f"Użytkownik {user.username} już istnieje, pomijam."))
            return
        user.set_password(options['password'])
        user.save()

        now = timezone.now()
        today = timezone.localdate()

        # 1. Kategorie i tagi
        work = Category.objects.create(user=user, name='Praca', color='#0d6efd')
        ideas = Category.objects.create(user=user, name='Pomysły', color='#ffc107')
        important = Tag.objects.create(user=user, name='Ważne', color='#dc3545')
        later = Tag.objects.create(user=user, name='Na później')

        # 2. Notatki
        meeting = Note.objects.create(
            user=user, title='Notatki ze spotkania', content='## Ustalenia\n- termin demo',
            status=Note.StatusChoices.PUBLISHED, category=work,
        )
        Note.objects.create(user=user, title='Pomysł na aplikację', content='Szkic...', category=ideas)
        Note.objects.create(
            user=user, title='Stary plan', content='Nieaktualne',
            status=Note.StatusChoices.ARCHIVED,
        )
        NoteTag.objects.create(note=meeting, tag=important)
        NoteTag.objects.create(note=meeting, tag=later)

        # 3. Projekty i zadania (postęp liczą sygnały)
        website = Project.objects.create(
            user=user, name='Nowa strona', status=Project.StatusChoices.IN_PROGRESS,
        )
        Project.objects.create(user=user, name='Przeprowadzka')

        Task.objects.create(user=user, project=website, title='Makieta', completed=True,
                            priority=Task.PriorityChoices.HIGH)
        Task.objects.create(user=user, project=website, title='Treści', completed=True)
        Task.objects.create(user=user, project=website, title='Wdrożenie',
                            priority=Task.PriorityChoices.MEDIUM, due_date=now + timedelta(days=7))
        Task.objects.create(user=user, title='Zapłacić rachunki', due_date=now - timedelta(days=2),
                            priority=Task.PriorityChoices.HIGH)

        # 4. Dziennik, baza wiedzy, szablony
        DailyNote.objects.create(user=user, date=today, content='Dobry dzień.', mood='happy')
        DailyNote.objects.create(user=user, date=today - timedelta(days=1), content='Dużo pracy.', mood='tired')
        KnowledgeArticle.objects.create(
            user=user, title='Django ORM', content='select_related vs prefetch_related',
            category='Python', tags=['django', 'orm'],
        )
        if not Template.objects.exists():
            Template.objects.create(
                name='Spotkanie', category='Meetings', description='Notatka ze spotkania',
                content='## Uczestnicy\n\n## Ustalenia\n\n## Zadania',
            )
            Template.objects.create(name='Retrospektywa', category='Review', content='## Co poszło dobrze\n')

        website.refresh_from_db()
        self.stdout.write(f"- Projekt {website.name}: {website.progress}%")
        self.stdout.write(self.style.SUCCESS(f'Utworzono dane demo dla użytkownika {user.username}.'))
