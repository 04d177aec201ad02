# apps/core/api.py
import json
from functools import wraps

from django.core.paginator import Paginator
from django.http import JsonResponse


def success(data, status=200):
    return JsonResponse(data, status=status, safe=False)


def error(message, status=500):
    return JsonResponse({'error': message}, status=status)


def not_found(message='Resource not found'):
    return error(message, status=404)


def bad_request(message):
    return error(message, status=400)


def validation_error(errors):
    """Błędy formularza Django -> {'error': ..., 'details': {pole: [komunikaty]}}."""
    if hasattr(errors, 'get_json_data'):
        errors = {
            field: [e['message'] for e in field_errors]
            for field, field_errors in errors.get_json_data().items()
        }
    return JsonResponse({'error': 'Validation failed', 'details': errors}, status=400)


class InvalidPayload(Exception):
    pass


def parse_json_body(request):
    """Zwraca słownik z ciała żądania. Pusty body = pusty słownik."""
    if not request.body:
        return {}
    try:
        payload = json.loads(request.body)
    except (ValueError, UnicodeDecodeError):
        raise InvalidPayload('Invalid JSON body')
    if not isinstance(payload, dict):
        raise InvalidPayload('JSON body must be an object')
    return payload


def json_login_required(view_func):
    """Jak login_required, ale zamiast przekierowania zwraca 401 w JSON."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return error('Unauthorized', status=401)
        try:
            return view_func(request, *args, **kwargs)
        except InvalidPayload as e:
            return bad_request(str(e))
    return wrapper


def paginate(queryset, request, per_page):
    """Zwraca (obiekty strony, total, page, total_pages)."""
    try:
        page_number = max(int(request.GET.get('page', 1)), 1)
    except (TypeError, ValueError):
        page_number = 1

    paginator = Paginator(queryset, per_page)
    total = paginator.count
    total_pages = paginator.num_pages if total else 0

    # Strona spoza zakresu -> pusta lista (jak skip/take)
    if page_number > paginator.num_pages:
        return [], total, page_number, total_pages

    return list(paginator.page(page_number).object_list), total, page_number, total_pages
