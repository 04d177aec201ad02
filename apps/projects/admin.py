from django.contrib import admin
from .models import Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ('name', 'status', 'progress', 'user', 'updated_at')
    list_filter = ('status',)
    search_fields = ('name', 'description')
    # progress jest editable=False, pokazujemy go tylko do odczytu
    readonly_fields = ('progress', 'created_at', 'updated_at')
