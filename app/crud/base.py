"""Generic CRUD base class for SQLAlchemy models."""

from __future__ import annotations

from typing import Any, Dict, Generic, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.database import Base


ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
	"""Reusable CRUD helper for SQLAlchemy models.

	All methods operate on model instances and return database objects, not schemas.
	"""

	def __init__(self, model: Type[ModelType]):
		self.model = model

	# ----- Read -----
	def get(self, db: Session, id: Any) -> Optional[ModelType]:
		"""Get one record by primary key."""
		return db.get(self.model, id)

	def get_by_field(self, db: Session, field_name: str, value: Any) -> Optional[ModelType]:
		"""Get first record where given field equals value."""
		if not hasattr(self.model, field_name):
			raise AttributeError(f"Model '{self.model.__name__}' has no field '{field_name}'")
		stmt = select(self.model).where(getattr(self.model, field_name) == value).limit(1)
		return db.scalars(stmt).first()

	# ----- Create -----
	def create(self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
		"""Create a new record from a Pydantic schema or dict."""
		obj_in_data: Dict[str, Any] = obj_in.model_dump(exclude_unset=True) if isinstance(obj_in, BaseModel) else dict(obj_in)
		db_obj = self.model(**obj_in_data)  # type: ignore[arg-type]
		try:
			db.add(db_obj)
			db.commit()
			db.refresh(db_obj)
		except Exception:
			db.rollback()
			raise
		return db_obj
