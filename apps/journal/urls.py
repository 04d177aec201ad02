from django.urls import path
from . import views

urlpatterns = [
    path('', views.daily_note_collection_view, name='daily_note_list'),
    path('by-date/', views.daily_note_by_date_view, name='daily_note_by_date'),
    path('<int:pk>/', views.daily_note_detail_view, name='daily_note_detail'),
]
