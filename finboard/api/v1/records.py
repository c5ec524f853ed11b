"""CRUD endpoints shared by every user-scoped record type"""

import logging
from typing import List, Type
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session

from finboard.api.dependencies import get_request_id, get_user_id
from finboard.domain.exceptions import RecordNotFoundError
from finboard.infrastructure.database.repositories import RecordRepository
from finboard.infrastructure.database.session import get_db
from finboard.infrastructure.observability.logging import log_mutation
from finboard.infrastructure.observability.metrics import record_mutation


def build_crud_router(
    path: str,
    repository_cls: Type[RecordRepository],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
) -> APIRouter:
    """
    Build list/create/get/update/delete routes for one record type.

    GET    {path}          list, newest first
    POST   {path}          create, 201
    GET    {path}/{id}     fetch one
    PATCH  {path}/{id}     partial update
    DELETE {path}/{id}     delete, 204
    """
    router = APIRouter()
    record_type = repository_cls.record_type

    def _not_found(db: Session, e: RecordNotFoundError) -> HTTPException:
        db.rollback()
        return HTTPException(status_code=404, detail=str(e))

    @router.get(path, response_model=List[response_schema])
    def list_records(user_id: str = Depends(get_user_id), db: Session = Depends(get_db)):
        return [response_schema.model_validate(r) for r in repository_cls(db).list(user_id)]

    @router.post(path, response_model=response_schema, status_code=201)
    def create_record(
        payload: create_schema,
        request: Request,
        user_id: str = Depends(get_user_id),
        db: Session = Depends(get_db),
    ):
        try:
            record = repository_cls(db).create(user_id, payload.model_dump())
            db.commit()
        except Exception as e:
            db.rollback()
            logging.error(f"Failed to create {record_type}: {e}", extra={"request_id": get_request_id(request)})
            raise HTTPException(status_code=500, detail="Internal server error")

        record_mutation(record_type, "create")
        log_mutation(get_request_id(request), user_id, record_type, "create", record.id)
        return response_schema.model_validate(record)

    @router.get(path + "/{record_id}", response_model=response_schema)
    def get_record(record_id: str, user_id: str = Depends(get_user_id), db: Session = Depends(get_db)):
        try:
            return response_schema.model_validate(repository_cls(db).get(user_id, record_id))
        except RecordNotFoundError as e:
            raise _not_found(db, e)

    @router.patch(path + "/{record_id}", response_model=response_schema)
    def update_record(
        record_id: str,
        payload: update_schema,
        request: Request,
        user_id: str = Depends(get_user_id),
        db: Session = Depends(get_db),
    ):
        # Explicit nulls are ignored; required columns cannot be cleared
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        try:
            record = repository_cls(db).update(user_id, record_id, changes)
            db.commit()
        except RecordNotFoundError as e:
            raise _not_found(db, e)
        except Exception as e:
            db.rollback()
            logging.error(f"Failed to update {record_type}: {e}", extra={"request_id": get_request_id(request)})
            raise HTTPException(status_code=500, detail="Internal server error")

        record_mutation(record_type, "update")
        log_mutation(get_request_id(request), user_id, record_type, "update", record_id)
        return response_schema.model_validate(record)

    @router.delete(path + "/{record_id}", status_code=204)
    def delete_record(
        record_id: str,
        request: Request,
        user_id: str = Depends(get_user_id),
        db: Session = Depends(get_db),
    ):
        try:
            repository_cls(db).delete(user_id, record_id)
            db.commit()
        except RecordNotFoundError as e:
            raise _not_found(db, e)
        except Exception as e:
            db.rollback()
            logging.error(f"Failed to delete {record_type}: {e}", extra={"request_id": get_request_id(request)})
            raise HTTPException(status_code=500, detail="Internal server error")

        record_mutation(record_type, "delete")
        log_mutation(get_request_id(request), user_id, record_type, "delete", record_id)

    return router
