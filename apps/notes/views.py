import logging
from django.conf import settings
from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Count
from django.views.decorators.http import require_http_methods
from apps.core.api import (
    success, error, not_found, bad_request, validation_error,
    json_login_required, parse_json_body, paginate,
)
from .filters import NoteFilter
from .forms import (
    CategoryForm, CategoryUpdateForm, TagForm, TagUpdateForm,
    NoteForm, NoteUpdateForm, UnarchiveForm, AttachTagForm,
)
from .models import Category, Tag, Note, NoteTag
from .serializers import category_to_dict, tag_to_dict, note_to_dict
from .services import NoteArchiveService

logger = logging.getLogger(__name__)


def _user_notes(request):
    return Note.objects.filter(user=request.user).select_related('category').prefetch_related('tags')


# ---------------------------------------------------------------------------
# Notatki
# ---------------------------------------------------------------------------

@require_http_methods(["GET", "POST"])
@json_login_required
def note_collection_view(request):
    if request.method == "POST":
        form = NoteForm(parse_json_body(request), user=request.user)
        if not form.is_valid():
            return validation_error(form.errors)
        try:
            note = Note.objects.create(user=request.user, **form.model_values())
        except DatabaseError:
            logger.exception("Error creating note")
            return error('Failed to create note')
        return success(note_to_dict(note), status=201)

    f = NoteFilter(request.GET, queryset=_user_notes(request).order_by('-updated_at'))
    if not f.is_valid():
        return validation_error(f.errors)

    notes, total, page, total_pages = paginate(f.qs, request, settings.WORKBENCH_PAGE_SIZE_NOTES)
    return success({
        'notes': [note_to_dict(n) for n in notes],
        'total': total,
        'page': page,
        'total_pages': total_pages,
    })


@require_http_methods(["GET", "PUT", "DELETE"])
@json_login_required
def note_detail_view(request, pk):
    note = _user_notes(request).filter(pk=pk).first()
    if not note:
        return not_found('Note not found')

    if request.method == "GET":
        return success(note_to_dict(note))

    if request.method == "DELETE":
        # Kaskada usuwa też powiązania NoteTag
        note.delete()
        return success({'message': 'Note deleted successfully'})

    form = NoteUpdateForm(parse_json_body(request), user=request.user)
    if not form.is_valid():
        return validation_error(form.errors)

    for field, value in form.model_values().items():
        setattr(note, field, value)
    note.save()
    return success(note_to_dict(note))


@require_http_methods(["POST"])
@json_login_required
def note_archive_view(request, pk):
    note = _user_notes(request).filter(pk=pk).first()
    if not note:
        return not_found('Note not found')

    note = NoteArchiveService().archive(note)
    return success(note_to_dict(note))


@require_http_methods(["POST"])
@json_login_required
def note_unarchive_view(request, pk):
    form = UnarchiveForm(parse_json_body(request))
    if not form.is_valid():
        return validation_error(form.errors)

    note = _user_notes(request).filter(pk=pk).first()
    if not note:
        return not_found('Note not found')

    note = NoteArchiveService().unarchive(note, form.cleaned_data['status'])
    return success(note_to_dict(note))


@require_http_methods(["GET", "POST"])
@json_login_required
def note_tags_view(request, pk):
    note = Note.objects.filter(pk=pk, user=request.user).first()
    if not note:
        return not_found('Note not found')

    if request.method == "GET":
        return success({'tags': [tag_to_dict(t) for t in note.tags.all()]})

    form = AttachTagForm(parse_json_body(request))
    if not form.is_valid():
        return bad_request('tag_id is required')

    tag = Tag.objects.filter(pk=form.cleaned_data['tag_id'], user=request.user).first()
    if not tag:
        return not_found('Tag not found')

    if NoteTag.objects.filter(note=note, tag=tag).exists():
        return bad_request('Tag is already assigned to this note')

    NoteTag.objects.create(note=note, tag=tag)
    return success({'tag': tag_to_dict(tag)}, status=201)


@require_http_methods(["DELETE"])
@json_login_required
def note_tag_remove_view(request, pk, tag_pk):
    deleted, _ = NoteTag.objects.filter(
        note_id=pk, note__user=request.user, tag_id=tag_pk
    ).delete()
    if not deleted:
        return not_found('Tag is not assigned to this note')
    return success({'message': 'Tag removed from note successfully'})


# ---------------------------------------------------------------------------
# Kategorie i tagi: nazwa unikalna w obrębie użytkownika
# ---------------------------------------------------------------------------

DUPLICATE_CATEGORY = 'A category with this name already exists'
DUPLICATE_TAG = 'A tag with this name already exists'


def _name_taken(model, user, name, exclude_pk=None):
    qs = model.objects.filter(user=user, name=name)
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    return qs.exists()


def _save_unique(instance):
    """
    Zapis w savepoincie. Zwraca False, gdy równoległe żądanie zajęło nazwę
    (unique_*_name_per_user), zamiast psuć transakcję.
    """
    try:
        with transaction.atomic():
            instance.save()
    except IntegrityError:
        return False
    return True


@require_http_methods(["GET", "POST"])
@json_login_required
def category_collection_view(request):
    if request.method == "POST":
        form = CategoryForm(parse_json_body(request))
        if not form.is_valid():
            return validation_error(form.errors)

        if _name_taken(Category, request.user, form.cleaned_data['name']):
            return bad_request(DUPLICATE_CATEGORY)

        category = Category(user=request.user, **form.cleaned_data)
        if not _save_unique(category):
            return bad_request(DUPLICATE_CATEGORY)
        return success(category_to_dict(category), status=201)

    categories = list(
        Category.objects.filter(user=request.user).annotate(note_count=Count('notes')).order_by('name')
    )
    return success({
        'categories': [category_to_dict(c) for c in categories],
        'total': len(categories),
    })


@require_http_methods(["GET", "PUT", "DELETE"])
@json_login_required
def category_detail_view(request, pk):
    category = Category.objects.filter(pk=pk, user=request.user).first()
    if not category:
        return not_found('Category not found')

    if request.method == "GET":
        notes = list(category.notes.order_by('-updated_at'))
        return success(category_to_dict(category, notes=notes))

    if request.method == "DELETE":
        if category.notes.exists():
            return bad_request(
                'Cannot delete category that has notes. Please reassign or delete the notes first.'
            )
        category.delete()
        return success({'message': 'Category deleted successfully'})

    form = CategoryUpdateForm(parse_json_body(request))
    if not form.is_valid():
        return validation_error(form.errors)

    changes = form.changed_fields()
    new_name = changes.get('name')
    if new_name and _name_taken(Category, request.user, new_name, exclude_pk=category.pk):
        return bad_request(DUPLICATE_CATEGORY)

    for field, value in changes.items():
        setattr(category, field, value)
    if not _save_unique(category):
        return bad_request(DUPLICATE_CATEGORY)

    category.note_count = category.notes.count()
    return success(category_to_dict(category))


@require_http_methods(["GET", "POST"])
@json_login_required
def tag_collection_view(request):
    if request.method == "POST":
        form = TagForm(parse_json_body(request))
        if not form.is_valid():
            return validation_error(form.errors)

        if _name_taken(Tag, request.user, form.cleaned_data['name']):
            return bad_request(DUPLICATE_TAG)

        tag = Tag(user=request.user, **form.cleaned_data)
        if not _save_unique(tag):
            return bad_request(DUPLICATE_TAG)
        return success(tag_to_dict(tag), status=201)

    tags = list(Tag.objects.filter(user=request.user).annotate(note_count=Count('notes')).order_by('name'))
    return success({
        'tags': [tag_to_dict(t) for t in tags],
        'total': len(tags),
    })


@require_http_methods(["GET", "PUT", "DELETE"])
@json_login_required
def tag_detail_view(request, pk):
    tag = Tag.objects.filter(pk=pk, user=request.user).first()
    if not tag:
        return not_found('Tag not found')

    if request.method == "GET":
        notes = list(tag.notes.order_by('-updated_at'))
        return success(tag_to_dict(tag, notes=notes))

    if request.method == "DELETE":
        tag.delete()
        return success({'message': 'Tag deleted successfully'})

    form = TagUpdateForm(parse_json_body(request))
    if not form.is_valid():
        return validation_error(form.errors)

    changes = form.changed_fields()
    new_name = changes.get('name')
    if new_name and _name_taken(Tag, request.user, new_name, exclude_pk=tag.pk):
        return bad_request(DUPLICATE_TAG)

    for field, value in changes.items():
        setattr(tag, field, value)
    if not _save_unique(tag):
        return bad_request(DUPLICATE_TAG)
    return success(tag_to_dict(tag))
