# apps/tasks/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('', views.task_collection_view, name='task_list'),  # /api/tasks/
    path('<int:pk>/', views.task_detail_view, name='task_detail'),
    path('<int:pk>/toggle/', views.task_toggle_view, name='task_toggle'),
]
