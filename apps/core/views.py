from django.contrib.auth import login, logout
from django.contrib.auth.forms import AuthenticationForm
from django.middleware.csrf import get_token
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from .api import (
    success, error, bad_request, validation_error,
    json_login_required, parse_json_body, InvalidPayload,
)
from .services import DashboardService


@csrf_exempt
@require_http_methods(["POST"])
def login_view(request):
    """Logowanie sesyjne dla klientów API (JSON: username, password)."""
    try:
        payload = parse_json_body(request)
    except InvalidPayload as e:
        return bad_request(str(e))

    form = AuthenticationForm(request, data=payload)
    if not form.is_valid():
        # Błąd "__all__" = złe dane logowania albo nieaktywne konto
        if '__all__' in form.errors:
            return error('Invalid username or password', status=401)
        return validation_error(form.errors)

    user = form.get_user()
    login(request, user)
    # Token CSRF po rotacji w login(), do nagłówka X-CSRFToken
    return success({
        'id': user.id,
        'username': user.get_username(),
        'csrf_token': get_token(request),
    })


@require_http_methods(["POST"])
@json_login_required
def logout_view(request):
    logout(request)
    return success({'message': 'Logged out successfully'})


@require_http_methods(["GET"])
@json_login_required
def dashboard_view(request):
    """API ze statystykami do strony głównej."""
    service = DashboardService()
    return success(service.get_summary(request.user))
