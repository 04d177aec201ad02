from django.urls import path
from . import views

urlpatterns = [
    path('', views.project_collection_view, name='project_list'),
    path('<int:pk>/', views.project_detail_view, name='project_detail'),
]
