def category_to_dict(category, notes=None):
    data = {
        'id': category.id,
        'name': category.name,
        'description': category.description,
        'color': category.color,
        'user_id': category.user_id,
        'created_at': category.created_at,
        'updated_at': category.updated_at,
    }
    if notes is not None:
        data['note_count'] = len(notes)
        data['notes'] = [note_to_dict(n, include_relations=False) for n in notes]
    else:
        data['note_count'] = getattr(category, 'note_count', 0)
    return data


def tag_to_dict(tag, notes=None):
    data = {
        'id': tag.id,
        'name': tag.name,
        'color': tag.color,
        'created_at': tag.created_at,
        'updated_at': tag.updated_at,
    }
    if notes is not None:
        data['note_count'] = len(notes)
        data['notes'] = [note_to_dict(n, include_relations=False) for n in notes]
    elif hasattr(tag, 'note_count'):
        data['note_count'] = tag.note_count
    return data


def note_to_dict(note, include_relations=True):
    data = {
        'id': note.id,
        'title': note.title,
        'content': note.content,
        'status': note.status,
        'is_archived': note.is_archived,
        'category_id': note.category_id,
        'user_id': note.user_id,
        'created_at': note.created_at,
        'updated_at': note.updated_at,
    }
    if include_relations:
        category = note.category
        data['category'] = {
            'id': category.id,
            'name': category.name,
            'color': category.color,
        } if category else None
        data['tags'] = [tag_to_dict(t) for t in note.tags.all()]
    return data
