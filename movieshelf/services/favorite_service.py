# movieshelf/services/favorite_service.py

import logging
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from movieshelf.core.exceptions import StoreError
from movieshelf.models.favorite import FavoriteModel, MediaType

logger = logging.getLogger(__name__)


class FavoriteService:

    def __init__(self, db: Session):
        self.db = db

    async def list_by_user(self, user_id: int, media_type: MediaType) -> List[FavoriteModel]:
        """Favorites of one user for one media type"""
        try:
            stmt = select(FavoriteModel).where(
                FavoriteModel.user_id == user_id,
                FavoriteModel.media_type == media_type,
            )
            return list(self.db.execute(stmt).scalars().all())

        except SQLAlchemyError as e:
            logger.error("Listing favorites for user %s failed: %s", user_id, e)
            raise StoreError(f"Failed to list favorites: {str(e)}") from e

    async def find_one(
        self, user_id: int, tmdb_id: int, media_type: MediaType
    ) -> Optional[FavoriteModel]:
        try:
            return self._find(user_id, tmdb_id, media_type)

        except SQLAlchemyError as e:
            logger.error("Favorite lookup failed: %s", e)
            raise StoreError(f"Failed to look up favorite: {str(e)}") from e

    async def create(self, user_id: int, tmdb_id: int, media_type: MediaType) -> FavoriteModel:
        """Add a favorite; an existing (user, tmdb_id, media_type) row is returned as-is"""
        try:
            existing = self._find(user_id, tmdb_id, media_type)
            if existing:
                return existing

            favorite = FavoriteModel(user_id=user_id, tmdb_id=tmdb_id, media_type=media_type)
            self.db.add(favorite)
            self.db.commit()
            self.db.refresh(favorite)
            return favorite

        except IntegrityError as e:
            # a concurrent insert won the unique constraint
            self.db.rollback()
            winner = self._find(user_id, tmdb_id, media_type)
            if winner is None:
                logger.error("Favorite insert failed: %s", e)
                raise StoreError(f"Failed to add favorite: {str(e)}") from e
            return winner
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Favorite insert failed: %s", e)
            raise StoreError(f"Failed to add favorite: {str(e)}") from e

    async def delete(self, favorite: FavoriteModel) -> None:
        try:
            self.db.delete(favorite)
            self.db.commit()

        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Favorite delete failed: %s", e)
            raise StoreError(f"Failed to remove favorite: {str(e)}") from e

    def _find(self, user_id: int, tmdb_id: int, media_type: MediaType) -> Optional[FavoriteModel]:
        stmt = select(FavoriteModel).where(
            FavoriteModel.user_id == user_id,
            FavoriteModel.tmdb_id == tmdb_id,
            FavoriteModel.media_type == media_type,
        )
        return self.db.execute(stmt).scalars().first()
