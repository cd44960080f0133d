# movieshelf/models/user.py

from sqlalchemy import Column, BigInteger, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from movieshelf.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="user")
    created_at = Column(DateTime, default=func.current_timestamp())
    updated_at = Column(DateTime, default=func.current_timestamp(), onupdate=func.current_timestamp())

    favorites = relationship("FavoriteModel", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<UserModel(id={self.id}, email='{self.email}')>"
