from django.views.decorators.http import require_http_methods
from apps.core.api import (
    success, not_found, validation_error,
    json_login_required, parse_json_body,
)
from .filters import KnowledgeArticleFilter
from .forms import KnowledgeArticleForm, KnowledgeArticleUpdateForm
from .models import KnowledgeArticle
from .serializers import article_to_dict


@require_http_methods(["GET", "POST"])
@json_login_required
def article_collection_view(request):
    if request.method == "POST":
        form = KnowledgeArticleForm(parse_json_body(request))
        if not form.is_valid():
            return validation_error(form.errors)

        article = KnowledgeArticle.objects.create(user=request.user, **form.cleaned_data)
        return success(article_to_dict(article), status=201)

    qs = KnowledgeArticle.objects.filter(user=request.user).order_by('-created_at')
    f = KnowledgeArticleFilter(request.GET, queryset=qs)
    if not f.is_valid():
        return validation_error(f.errors)

    articles = list(f.qs)
    return success({
        'articles': [article_to_dict(a) for a in articles],
        'total': len(articles),
    })


@require_http_methods(["GET", "PUT", "DELETE"])
@json_login_required
def article_detail_view(request, pk):
    article = KnowledgeArticle.objects.filter(pk=pk, user=request.user).first()
    if not article:
        return not_found('Knowledge article not found')

    if request.method == "GET":
        return success(article_to_dict(article))

    if request.method == "DELETE":
        article.delete()
        return success({'message': 'Knowledge article deleted successfully'})

    form = KnowledgeArticleUpdateForm(parse_json_body(request))
    if not form.is_valid():
        return validation_error(form.errors)

    for field, value in form.changed_fields().items():
        setattr(article, field, value)
    article.save()
    return success(article_to_dict(article))
