from django.contrib import admin
from .models import KnowledgeArticle

admin.site.register(KnowledgeArticle)
