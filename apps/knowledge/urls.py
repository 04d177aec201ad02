from django.urls import path
from . import views

urlpatterns = [
    path('', views.article_collection_view, name='article_list'),
    path('<int:pk>/', views.article_detail_view, name='article_detail'),
]
