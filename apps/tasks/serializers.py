def task_to_dict(task, include_project=True):
    data = {
        'id': task.id,
        'title': task.title,
        'description': task.description,
        'completed': task.completed,
        'priority': task.priority,
        'due_date': task.due_date,
        'is_overdue': task.is_overdue,
        'project_id': task.project_id,
        'user_id': task.user_id,
        'created_at': task.created_at,
        'updated_at': task.updated_at,
    }
    if include_project:
        project = task.project
        data['project'] = {
            'id': project.id,
            'name': project.name,
            'status': project.status,
            'progress': project.progress,
        } if project else None
    return data
