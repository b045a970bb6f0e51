# app/api/v1/endpoints/projects.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from app import crud
from app.api.v1.errors import http_error
from app.core.database import get_session
from app.core.exceptions import TeminatError
from app.schemas.project import ProjectCreate, ProjectUpdate, ProjectRead

router = APIRouter()


@router.get("/projects", response_model=List[ProjectRead])
def list_projects(
		skip: int = Query(0, ge=0),
		limit: int | None = Query(None, ge=1),
		db: Session = Depends(get_session)
):
	return crud.project.get_multi(db, skip=skip, limit=limit)


@router.post("/projects", response_model=ProjectRead, status_code=201)
def create_project(project_in: ProjectCreate, db: Session = Depends(get_session)):
	return crud.project.create(db, project_in)


@router.get("/projects/{project_id}", response_model=ProjectRead)
def get_project(project_id: str, db: Session = Depends(get_session)):
	project = crud.project.get(db, project_id)
	if not project:
		raise HTTPException(status_code=404, detail="Proje bulunamadı")
	return project


@router.put("/projects/{project_id}", response_model=ProjectRead)
def update_project(project_id: str, project_in: ProjectUpdate, db: Session = Depends(get_session)):
	project = crud.project.get(db, project_id)
	if not project:
		raise HTTPException(status_code=404, detail="Proje bulunamadı")
	return crud.project.update(db, project, project_in)


@router.delete("/projects/{project_id}", status_code=204)
def delete_project(project_id: str, db: Session = Depends(get_session)):
	"""
	Deletes a project. A project that still has guarantee letters or credits
	is kept and the call answers 409.
	"""
	try:
		project = crud.project.get_or_raise(db, project_id)
		crud.project.delete(db, project)
	except TeminatError as e:
		raise http_error(e)
