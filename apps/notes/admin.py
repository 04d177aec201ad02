from django.contrib import admin
from .models import Category, Tag, Note, NoteTag


class NoteTagInline(admin.TabularInline):
    model = NoteTag
    extra = 1


@admin.register(Note)
class NoteAdmin(admin.ModelAdmin):
    list_display = ('title', 'status', 'category', 'user', 'updated_at')
    list_filter = ('status', 'category')
    search_fields = ('title', 'content')
    inlines = [NoteTagInline]


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ('name', 'color', 'user')
    search_fields = ('name',)


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ('name', 'color', 'user')
    search_fields = ('name',)
