import logging
from django.conf import settings
from django.db import DatabaseError
from django.db.models import Count, Q
from django.views.decorators.http import require_http_methods
from apps.core.api import (
    success, error, not_found, bad_request, validation_error,
    json_login_required, parse_json_body, paginate,
)
from apps.tasks.models import Task  # Potrzebne do wyświetlenia zadań w projekcie
from .forms import ProjectForm, ProjectUpdateForm
from .models import Project
from .serializers import project_to_dict

logger = logging.getLogger(__name__)


def _project_tasks(project):
    return list(Task.objects.filter(project=project).in_display_order())


@require_http_methods(["GET", "POST"])
@json_login_required
def project_collection_view(request):
    """Lista projektów ze statystykami zadań / tworzenie projektu."""
    if request.method == "POST":
        form = ProjectForm(parse_json_body(request))
        if not form.is_valid():
            return validation_error(form.errors)

        try:
            # Postęp zawsze startuje od 0 (domyślna wartość modelu)
            project = Project.objects.create(user=request.user, **form.cleaned_data)
        except DatabaseError:
            logger.exception("Error creating project")
            return error('Failed to create project')

        return success(project_to_dict(project, tasks=[]), status=201)

    qs = Project.objects.filter(user=request.user)
    status = request.GET.get('status')
    if status:
        qs = qs.filter(status=status)

    # Agregacja po stronie bazy (bez N+1)
    qs = qs.annotate(
        task_count=Count('tasks'),
        completed_task_count=Count('tasks', filter=Q(tasks__completed=True))
    ).order_by('status', '-progress', '-created_at')

    projects, total, page, total_pages = paginate(qs, request, settings.WORKBENCH_PAGE_SIZE_PROJECTS)
    return success({
        'projects': [project_to_dict(p) for p in projects],
        'total': total,
        'page': page,
        'total_pages': total_pages,
    })


@require_http_methods(["GET", "PUT", "DELETE"])
@json_login_required
def project_detail_view(request, pk):
    """Dashboard konkretnego projektu."""
    project = Project.objects.filter(pk=pk, user=request.user).first()
    if not project:
        return not_found('Project not found')

    if request.method == "GET":
        return success(project_to_dict(project, tasks=_project_tasks(project)))

    if request.method == "DELETE":
        if project.tasks.exists():
            return bad_request(
                'Cannot delete project with existing tasks. Please delete or reassign all tasks first.'
            )
        try:
            project.delete()
        except DatabaseError:
            logger.exception("Error deleting project %s", pk)
            return error('Failed to delete project')
        return success({'message': 'Project deleted successfully'})

    # PUT: tylko name/description/status; `progress` z payloadu jest ignorowany
    form = ProjectUpdateForm(parse_json_body(request))
    if not form.is_valid():
        return validation_error(form.errors)

    changes = form.changed_fields()
    for field, value in changes.items():
        setattr(project, field, value)

    try:
        project.save(update_fields=list(changes) + ['updated_at'])
    except DatabaseError:
        logger.exception("Error updating project %s", pk)
        return error('Failed to update project')

    return success(project_to_dict(project, tasks=_project_tasks(project)))
