from django.contrib import admin
from .models import Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ('title', 'project', 'priority', 'completed', 'due_date', 'user')
    list_filter = ('completed', 'priority', 'project')
    search_fields = ('title', 'description')
