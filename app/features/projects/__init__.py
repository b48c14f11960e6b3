"""Projects feature: the Project record, its repository and the startup seed."""

from app.features.projects.models import Project
from app.features.projects.repository import ProjectRepository, SqlAlchemyProjectRepository
from app.features.projects.runner import SEED_PROJECT_NAMES, ProjectSeedRunner

__all__ = [
    "SEED_PROJECT_NAMES",
    "Project",
    "ProjectRepository",
    "ProjectSeedRunner",
    "SqlAlchemyProjectRepository",
]
