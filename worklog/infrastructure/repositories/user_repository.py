"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from worklog.domain.entities import User
from worklog.infrastructure.models import UserModel
from worklog.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self._get_model(id=user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str, *, include_deleted: bool = False) -> User | None:
        model = self._get_model(include_deleted, email=email)
        return self._to_entity(model) if model else None

    def exists(self, user_id: int) -> bool:
        return self._get_model(id=user_id) is not None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self._get_model(id=user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, user_id: int) -> None:
        """Soft delete the user; activity rows keep pointing at the account."""

        model = self._get_model(id=user_id)
        if not model:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)

        model.deleted = True
        model.deleted_at = ensure_app_naive_datetime(now_in_app_timezone())
        model.is_active = False
        self.session.add(model)
        self.session.commit()

    def get_map_by_ids(
        self, user_ids: Iterable[int | None], *, include_deleted: bool = False
    ) -> dict[int, User]:
        unique_ids = {int(user_id) for user_id in user_ids if user_id is not None}
        if not unique_ids:
            return {}

        query = self.session.query(UserModel).filter(UserModel.id.in_(unique_ids))
        if not include_deleted:
            query = query.filter(UserModel.deleted.is_(False))
        return {model.id: self._to_entity(model) for model in query.all()}

    def _get_model(self, include_deleted: bool = False, **filters) -> UserModel | None:
        query = self.session.query(UserModel)
        if not include_deleted:
            query = query.filter(UserModel.deleted.is_(False))
        return query.filter_by(**filters).first()

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            role=model.role,
            avatar=model.avatar,
            preferences=dict(model.preferences or {}),
            last_login=ensure_app_timezone(model.last_login),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            is_active=model.is_active,
            deleted=model.deleted,
            deleted_at=ensure_app_timezone(model.deleted_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
        model.password = user.password
        model.role = user.role
        model.avatar = user.avatar
        model.preferences = dict(user.preferences or {})
        model.last_login = ensure_app_naive_datetime(user.last_login)
        model.is_active = user.is_active
        model.deleted = user.deleted
        model.deleted_at = ensure_app_naive_datetime(user.deleted_at)


__all__ = ["UserRepository"]
