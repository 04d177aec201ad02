from django.contrib import admin
from .models import DailyNote


@admin.register(DailyNote)
class DailyNoteAdmin(admin.ModelAdmin):
    list_display = ('date', 'mood', 'user')
    list_filter = ('mood',)
    date_hierarchy = 'date'
