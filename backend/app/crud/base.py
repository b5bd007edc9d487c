"""Generic CRUD operations shared by the content resources."""

from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import or_
from sqlalchemy.orm import Session

from backend.app.db.base_class import Base

ModelType = TypeVar("ModelType", bound=Base)

LIKE_ESCAPE = "\\"


def contains_pattern(term: str) -> str:
    """LIKE pattern that matches ``term`` literally anywhere in a column."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def ilike_any(columns: Sequence[Any], term: str):
    pattern = contains_pattern(term)
    return or_(*(column.ilike(pattern, escape=LIKE_ESCAPE) for column in columns))


class CRUDBase(Generic[ModelType]):
    def __init__(self, model: Type[ModelType]):
        self.model = model

    def get(self, db: Session, id: int) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.id == id).first()

    def get_by(self, db: Session, **filters: Any) -> Optional[ModelType]:
        return db.query(self.model).filter_by(**filters).first()

    def get_multi(
        self,
        db: Session,
        *,
        filters: Sequence[Any] = (),
        skip: int = 0,
        limit: Optional[int] = None,
        order_by: Sequence[Any] = (),
    ) -> List[ModelType]:
        query = db.query(self.model).filter(*filters)
        query = query.order_by(*order_by) if order_by else query.order_by(self.model.id.desc())
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count(self, db: Session, *, filters: Sequence[Any] = ()) -> int:
        return db.query(self.model).filter(*filters).count()

    def create(self, db: Session, *, obj_in: BaseModel | dict, **extra: Any) -> ModelType:
        data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        obj = self.model(**data, **extra)
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def update(self, db: Session, *, db_obj: ModelType, obj_in: BaseModel | dict) -> ModelType:
        update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: ModelType) -> ModelType:
        db.delete(db_obj)
        db.commit()
        return db_obj
