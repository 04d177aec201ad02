def article_to_dict(article):
    return {
        'id': article.id,
        'title': article.title,
        'content': article.content,
        'category': article.category,
        'tags': article.tags,
        'user_id': article.user_id,
        'created_at': article.created_at,
        'updated_at': article.updated_at,
    }
