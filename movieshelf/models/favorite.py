# movieshelf/models/favorite.py

from sqlalchemy import (
    Column,
    BigInteger,
    Integer,
    DateTime,
    Enum,
    ForeignKey,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from movieshelf.database import Base
import enum


class MediaType(str, enum.Enum):
    movie = "movie"
    tv = "tv"


class FavoriteModel(Base):
    __tablename__ = "favorites"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    user_id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tmdb_id = Column(Integer, nullable=False)
    media_type = Column(Enum(MediaType, name="media_type"), nullable=False)
    created_at = Column(DateTime, default=func.current_timestamp())

    __table_args__ = (
        UniqueConstraint("user_id", "tmdb_id", "media_type", name="unique_favorite"),
    )

    user = relationship("UserModel", back_populates="favorites")

    def __repr__(self):
        return (
            f"<FavoriteModel(user_id={self.user_id}, tmdb_id={self.tmdb_id}, "
            f"media_type={self.media_type})>"
        )
