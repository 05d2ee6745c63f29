"""
Songbird Server - MiscSettings Database Model

Global server settings: session secret and library indexing options.
"""

from sqlalchemy import Column, Integer, String, CheckConstraint

from models.database.base import Base


class MiscSettings(Base):
    """
    Misc_settings table - global settings
    Only one row allowed (id=1)
    """
    __tablename__ = "misc_settings"

    id = Column(Integer, primary_key=True)
    auth_secret = Column(String, nullable=False)
    index_sleep_duration_seconds = Column(Integer, nullable=False)
    index_album_art_pattern = Column(String, nullable=False)

    __table_args__ = (
        CheckConstraint('id = 1', name='single_row_constraint'),
    )
