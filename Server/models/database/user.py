"""
Songbird Server - User Database Model

User accounts. Only the password hash is stored.
"""

from sqlalchemy import Column, Integer, String

from models.database.base import Base


class User(Base):
    """Users table - stores user credentials"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False)
