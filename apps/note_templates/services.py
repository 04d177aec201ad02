from apps.notes.models import Note
from .models import Template


class TemplateService:
    def create_note(self, template: Template, user) -> Note:
        """Nowa notatka (DRAFT) z treścią szablonu."""
        return Note.objects.create(
            user=user,
            title=template.note_title,
            content=template.content,
            status=Note.StatusChoices.DRAFT
        )
