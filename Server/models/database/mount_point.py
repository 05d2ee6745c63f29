"""
Songbird Server - MountPoint Database Model

Mount directories scanned by the indexer and exposed to clients by name.
"""

from sqlalchemy import Column, Integer, String

from models.database.base import Base


class MountPoint(Base):
    """Mount_points table - one row per mount directory"""
    __tablename__ = "mount_points"

    id = Column(Integer, primary_key=True, autoincrement=True)
    source = Column(String, nullable=False)
    name = Column(String, unique=True, nullable=False)
