from django.urls import path
from . import views

urlpatterns = [
    path('notes/', views.note_collection_view, name='note_list'),
    path('notes/<int:pk>/', views.note_detail_view, name='note_detail'),
    path('notes/<int:pk>/archive/', views.note_archive_view, name='note_archive'),
    path('notes/<int:pk>/unarchive/', views.note_unarchive_view, name='note_unarchive'),
    path('notes/<int:pk>/tags/', views.note_tags_view, name='note_tags'),
    path('notes/<int:pk>/tags/<int:tag_pk>/', views.note_tag_remove_view, name='note_tag_remove'),

    path('categories/', views.category_collection_view, name='category_list'),
    path('categories/<int:pk>/', views.category_detail_view, name='category_detail'),

    path('tags/', views.tag_collection_view, name='tag_list'),
    path('tags/<int:pk>/', views.tag_detail_view, name='tag_detail'),
]
