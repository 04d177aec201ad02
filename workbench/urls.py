# workbench/urls.py
from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path('admin/', admin.site.urls),
    # API naszych aplikacji:
    path('api/', include('apps.core.urls')),
    path('api/projects/', include('apps.projects.urls')),
    path('api/tasks/', include('apps.tasks.urls')),
    path('api/', include('apps.notes.urls')),
    path('api/daily-notes/', include('apps.journal.urls')),
    path('api/knowledge-articles/', include('apps.knowledge.urls')),
    path('api/templates/', include('apps.note_templates.urls')),
]
