from .models import Note


class NoteArchiveService:
    def archive(self, note: Note) -> Note:
        note.status = Note.StatusChoices.ARCHIVED
        note.save(update_fields=['status', 'updated_at'])
        return note

    def unarchive(self, note: Note, status=Note.StatusChoices.PUBLISHED) -> Note:
        """Przywraca notatkę z archiwum jako PUBLISHED (domyślnie) lub DRAFT."""
        if status not in (Note.StatusChoices.PUBLISHED, Note.StatusChoices.DRAFT):
            raise ValueError("Note can only be restored as PUBLISHED or DRAFT")
        note.status = status
        note.save(update_fields=['status', 'updated_at'])
        return note
