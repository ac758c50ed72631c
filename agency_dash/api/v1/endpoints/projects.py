"""
Project Endpoints Module

This module provides CRUD endpoints for managing projects. Listing can be narrowed to
the projects of one client; completion time is stamped by the store when a project's
status is first set to "completed".
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from agency_dash.models.project import Project, ProjectCreate, ProjectUpdate
from agency_dash.store import MemoryStore
from agency_dash.api import deps

router = APIRouter()


@router.get("", response_model=List[Project])
def list_projects(
    client_id: Optional[str] = None,
    store: MemoryStore = Depends(deps.get_store),
):
    """
    Retrieve projects, optionally only those of one client.

    Args:
        client_id: Optional client ID to filter projects. An unknown client
            simply yields an empty list.
        store: Entity store

    Returns:
        List[Project]: List of project objects
    """
    if client_id is not None:
        return store.projects.list_by_client(client_id)
    return store.projects.list()


@router.get("/{project_id}", response_model=Project)
def read_project(project_id: str, store: MemoryStore = Depends(deps.get_store)):
    """
    Get a specific project by ID.

    Raises:
        HTTPException 404: If the project doesn't exist
    """
    project = store.projects.get(project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.post("", response_model=Project, status_code=status.HTTP_201_CREATED)
def create_project(project: ProjectCreate, store: MemoryStore = Depends(deps.get_store)):
    """
    Create a new project.

    The client_id is stored as given; it is not checked against existing clients.

    Args:
        project: Project data to create
        store: Entity store

    Returns:
        Project: The newly created project object
    """
    return store.projects.create(project)


@router.patch("/{project_id}", response_model=Project)
def update_project(
    project_id: str,
    project_update: ProjectUpdate,
    store: MemoryStore = Depends(deps.get_store),
):
    """
    Update an existing project.

    Setting status to "completed" stamps completed_at unless the project already
    has a completion time.

    Args:
        project_id: ID of the project to update
        project_update: Fields to update
        store: Entity store

    Returns:
        Project: The updated project object

    Raises:
        HTTPException 404: If the project doesn't exist
    """
    project = store.projects.update(project_id, project_update)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.delete("/{project_id}")
def delete_project(project_id: str, store: MemoryStore = Depends(deps.get_store)):
    """
    Delete a project.

    Returns:
        dict: Success message

    Raises:
        HTTPException 404: If the project doesn't exist
    """
    if not store.projects.delete(project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    return {"status": "success", "detail": "Project deleted"}
