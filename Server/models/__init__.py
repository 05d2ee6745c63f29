"""
Songbird Server - Models Package

This package contains all data models for the Songbird server:
- database: SQLAlchemy models for the settings tables
- config: Pydantic models for the configuration document
"""

# Re-export all models for convenient importing
from models.database import *
from models.config import *
