def template_to_dict(template):
    return {
        'id': template.id,
        'name': template.name,
        'description': template.description,
        'content': template.content,
        'category': template.category,
        'created_at': template.created_at,
        'updated_at': template.updated_at,
    }
