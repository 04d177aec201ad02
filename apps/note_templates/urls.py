from django.urls import path
from . import views

urlpatterns = [
    path('', views.template_collection_view, name='template_list'),
    path('<int:pk>/', views.template_detail_view, name='template_detail'),
    path('<int:pk>/use/', views.template_use_view, name='template_use'),
]
