from django.apps import AppConfig

class NoteTemplatesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.note_templates'
    label = 'note_templates'
