# apps/tasks/views.py
import logging
from django.conf import settings
from django.db import DatabaseError
from django.views.decorators.http import require_http_methods
from apps.core.api import (
    success, error, not_found, validation_error,
    json_login_required, parse_json_body, paginate,
)
from apps.projects.domain.exceptions import ProgressRecalculationError
from .filters import TaskFilter
from .forms import TaskForm, TaskUpdateForm
from .models import Task
from .serializers import task_to_dict

logger = logging.getLogger(__name__)

# Zapis zadania przelicza też postęp projektu (sygnały)
MUTATION_ERRORS = (ProgressRecalculationError, DatabaseError)


def _get_task(request, pk):
    return Task.objects.select_related('project').filter(pk=pk, user=request.user).first()


@require_http_methods(["GET", "POST"])
@json_login_required
def task_collection_view(request):
    if request.method == "POST":
        return _create_task(request)

    # GET: lista z filtrami i paginacją
    qs = Task.objects.filter(user=request.user).select_related('project').in_display_order()
    f = TaskFilter(request.GET, queryset=qs)
    if not f.is_valid():
        return validation_error(f.errors)

    tasks, total, page, total_pages = paginate(f.qs, request, settings.WORKBENCH_PAGE_SIZE_TASKS)
    return success({
        'tasks': [task_to_dict(t) for t in tasks],
        'total': total,
        'page': page,
        'total_pages': total_pages,
    })


def _create_task(request):
    form = TaskForm(parse_json_body(request), user=request.user)
    if not form.is_valid():
        return validation_error(form.errors)

    try:
        # post_save przeliczy postęp projektu, jeśli zadanie go ma
        task = Task.objects.create(user=request.user, **form.model_values())
    except MUTATION_ERRORS:
        logger.exception("Error creating task")
        return error('Failed to create task')

    task.refresh_from_db()
    return success(task_to_dict(task), status=201)


@require_http_methods(["GET", "PUT", "DELETE"])
@json_login_required
def task_detail_view(request, pk):
    task = _get_task(request, pk)
    if not task:
        return not_found('Task not found')

    if request.method == "GET":
        return success(task_to_dict(task))

    if request.method == "DELETE":
        try:
            # post_delete przeliczy (były) projekt zadania
            task.delete()
        except MUTATION_ERRORS:
            logger.exception("Error deleting task %s", pk)
            return error('Failed to delete task')
        return success({'message': 'Task deleted successfully'})

    # PUT: aktualizacja częściowa
    form = TaskUpdateForm(parse_json_body(request), user=request.user)
    if not form.is_valid():
        return validation_error(form.errors)

    for field, value in form.model_values().items():
        setattr(task, field, value)

    try:
        task.save()
    except MUTATION_ERRORS:
        logger.exception("Error updating task %s", pk)
        return error('Failed to update task')

    task.refresh_from_db()
    return success(task_to_dict(task))


@require_http_methods(["POST"])
@json_login_required
def task_toggle_view(request, pk):
    task = _get_task(request, pk)
    if not task:
        return not_found('Task not found')

    task.completed = not task.completed
    try:
        task.save()
    except MUTATION_ERRORS:
        logger.exception("Error toggling task %s", pk)
        return error('Failed to toggle task completion')

    task.refresh_from_db()
    return success(task_to_dict(task))
