from django.views.decorators.http import require_http_methods
from apps.core.api import (
    success, not_found, bad_request, validation_error,
    json_login_required, parse_json_body,
)
from .filters import DailyNoteFilter
from .forms import DailyNoteForm, DailyNoteUpdateForm, DailyNoteFilterForm
from .models import DailyNote
from .serializers import daily_note_to_dict

DUPLICATE_ENTRY = 'Entry already exists for this date'


@require_http_methods(["GET", "POST"])
@json_login_required
def daily_note_collection_view(request):
    if request.method == "POST":
        form = DailyNoteForm(parse_json_body(request))
        if not form.is_valid():
            return validation_error(form.errors)

        # Data jest już znormalizowana do dnia (IsoDateField)
        if DailyNote.objects.filter(user=request.user, date=form.cleaned_data['date']).exists():
            return bad_request(DUPLICATE_ENTRY)

        daily_note = DailyNote.objects.create(user=request.user, **form.cleaned_data)
        return success(daily_note_to_dict(daily_note), status=201)

    f = DailyNoteFilter(request.GET, queryset=DailyNote.objects.filter(user=request.user).order_by('-date'))
    if not f.is_valid():
        return validation_error(f.errors)

    daily_notes = list(f.qs)
    return success({
        'daily_notes': [daily_note_to_dict(d) for d in daily_notes],
        'total': len(daily_notes),
    })


@require_http_methods(["GET"])
@json_login_required
def daily_note_by_date_view(request):
    form = DailyNoteFilterForm(request.GET)
    if not form.is_valid():
        if 'date' not in request.GET:
            return bad_request('Date parameter is required')
        return validation_error(form.errors)

    daily_note = DailyNote.objects.filter(user=request.user, date=form.cleaned_data['date']).first()
    if not daily_note:
        return not_found('Daily note not found for this date')
    return success(daily_note_to_dict(daily_note))


@require_http_methods(["GET", "PUT", "DELETE"])
@json_login_required
def daily_note_detail_view(request, pk):
    daily_note = DailyNote.objects.filter(pk=pk, user=request.user).first()
    if not daily_note:
        return not_found('Daily note not found')

    if request.method == "GET":
        return success(daily_note_to_dict(daily_note))

    if request.method == "DELETE":
        daily_note.delete()
        return success({'message': 'Daily note deleted successfully'})

    form = DailyNoteUpdateForm(parse_json_body(request))
    if not form.is_valid():
        return validation_error(form.errors)

    changes = form.changed_fields()
    new_date = changes.get('date')
    if new_date:
        duplicate = DailyNote.objects.filter(user=request.user, date=new_date).exclude(pk=daily_note.pk)
        if duplicate.exists():
            return bad_request(DUPLICATE_ENTRY)

    for field, value in changes.items():
        setattr(daily_note, field, value)
    daily_note.save()
    return success(daily_note_to_dict(daily_note))
