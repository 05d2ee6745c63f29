"""
Songbird Server - DDNSConfig Database Model

Credentials used by the dynamic DNS updater.
"""

from sqlalchemy import Column, Integer, String, CheckConstraint

from models.database.base import Base


class DDNSConfig(Base):
    """
    Ddns_config table - dynamic DNS host and credentials
    Only one row allowed (id=1)
    """
    __tablename__ = "ddns_config"

    id = Column(Integer, primary_key=True)
    host = Column(String, nullable=False, default="")
    username = Column(String, nullable=False, default="")
    password = Column(String, nullable=False, default="")

    __table_args__ = (
        CheckConstraint('id = 1', name='single_row_constraint'),
    )
