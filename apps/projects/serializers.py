from apps.tasks.serializers import task_to_dict


def project_to_dict(project, tasks=None):
    """
    Projekt + statystyki zadań. Liczniki biorą się z adnotacji
    (task_count / completed_task_count) albo z przekazanej listy zadań.
    """
    data = {
        'id': project.id,
        'name': project.name,
        'description': project.description,
        'status': project.status,
        'progress': project.progress,
        'user_id': project.user_id,
        'created_at': project.created_at,
        'updated_at': project.updated_at,
    }

    if tasks is not None:
        data['task_count'] = len(tasks)
        data['completed_task_count'] = sum(1 for t in tasks if t.completed)
        data['tasks'] = [task_to_dict(t, include_project=False) for t in tasks]
    else:
        data['task_count'] = getattr(project, 'task_count', 0)
        data['completed_task_count'] = getattr(project, 'completed_task_count', 0)

    return data
