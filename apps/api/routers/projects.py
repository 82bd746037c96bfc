from typing import List

from fastapi import APIRouter, Depends

from apps.api.deps import get_application_repo, get_project_repo
from domain.models import Application, Message, Project, ProjectIn
from services.persistence.mongo import ApplicationRepository, ProjectRepository

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=List[Project])
def list_projects(repo: ProjectRepository = Depends(get_project_repo)):
    return repo.list_projects()


@router.post("", response_model=Project)
def create_project(payload: ProjectIn, repo: ProjectRepository = Depends(get_project_repo)):
    return repo.create_project(payload)


@router.delete("/{project_id}", response_model=Message)
def delete_project(project_id: str, repo: ProjectRepository = Depends(get_project_repo)):
    repo.delete_project(project_id)
    return {"message": "Project deleted successfully"}


@router.get("/{project_id}/applications", response_model=List[Application])
def list_project_applications(
    project_id: str,
    repo: ApplicationRepository = Depends(get_application_repo),
):
    # unknown project -> empty list; no existence check
    return repo.list_for_project(project_id)
