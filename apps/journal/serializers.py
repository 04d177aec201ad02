def daily_note_to_dict(daily_note):
    return {
        'id': daily_note.id,
        'date': daily_note.date,
        'content': daily_note.content,
        'mood': daily_note.mood,
        'user_id': daily_note.user_id,
        'created_at': daily_note.created_at,
        'updated_at': daily_note.updated_at,
    }
