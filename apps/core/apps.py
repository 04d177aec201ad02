from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.core'
    label = 'core'
    # Wspólne API (koperta JSON, pola formularzy), dashboard, seed_demo
    verbose_name = 'Workbench core'
