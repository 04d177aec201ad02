from django.views.decorators.http import require_http_methods
from apps.core.api import (
    success, not_found, validation_error,
    json_login_required, parse_json_body,
)
from apps.notes.serializers import note_to_dict
from .forms import TemplateForm, TemplateUpdateForm
from .models import Template
from .serializers import template_to_dict
from .services import TemplateService


@require_http_methods(["GET", "POST"])
@json_login_required
def template_collection_view(request):
    if request.method == "POST":
        form = TemplateForm(parse_json_body(request))
        if not form.is_valid():
            return validation_error(form.errors)

        template = Template.objects.create(**form.cleaned_data)
        return success(template_to_dict(template), status=201)

    templates = Template.objects.order_by('name')
    category = request.GET.get('category')
    if category:
        templates = templates.filter(category=category)

    templates = list(templates)
    return success({
        'templates': [template_to_dict(t) for t in templates],
        'total': len(templates),
    })


@require_http_methods(["GET", "PUT", "DELETE"])
@json_login_required
def template_detail_view(request, pk):
    template = Template.objects.filter(pk=pk).first()
    if not template:
        return not_found('Template not found')

    if request.method == "GET":
        return success(template_to_dict(template))

    if request.method == "DELETE":
        template.delete()
        return success({'message': 'Template deleted successfully'})

    form = TemplateUpdateForm(parse_json_body(request))
    if not form.is_valid():
        return validation_error(form.errors)

    for field, value in form.changed_fields().items():
        setattr(template, field, value)
    template.save()
    return success(template_to_dict(template))


@require_http_methods(["POST"])
@json_login_required
def template_use_view(request, pk):
    template = Template.objects.filter(pk=pk).first()
    if not template:
        return not_found('Template not found')

    note = TemplateService().create_note(template, request.user)
    return success(note_to_dict(note), status=201)
