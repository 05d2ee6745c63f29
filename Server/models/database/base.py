"""
Songbird Server - Database Base

Shared declarative base for the settings tables.
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
