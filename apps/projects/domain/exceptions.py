class ProgressRecalculationError(Exception):
    pass


class ProjectNotFound(ProgressRecalculationError):
    def __init__(self, project_id):
        super().__init__(f"Project {project_id} not found")
        self.project_id = project_id


class ProgressStorageError(ProgressRecalculationError):
    pass
