"""
Songbird Server - Settings Endpoints

Read and amend the stored configuration over HTTP.
"""

import logging
from fastapi import APIRouter, HTTPException, status

import config_sync
from exceptions import InvalidPathError, StoreError
from models.config import Config

# Create logger
logger = logging.getLogger(__name__)

# Create router instance
router = APIRouter()


# ==================== Settings Endpoints ====================

@router.get("/api/settings", response_model=Config, response_model_exclude_none=True, tags=["Settings"])
def get_settings():
    """
    Get the stored configuration
    User passwords are always returned empty.

    Returns:
        Config: Current configuration document
    """
    from database import settings_store

    try:
        return config_sync.Read(settings_store)
    except StoreError as e:
        logger.error(f"Error reading settings: {str(e)}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to read settings")


@router.put("/api/settings", status_code=status.HTTP_204_NO_CONTENT, tags=["Settings"])
def put_settings(new_config: Config):
    """
    Amend the stored configuration
    Fields missing from the body are left unchanged.

    Args:
        new_config: Configuration document (JSON body)
    """
    from database import settings_store

    try:
        new_config.CleanPaths()
    except InvalidPathError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        config_sync.Amend(settings_store, new_config)
    except StoreError as e:
        logger.error(f"Error updating settings: {str(e)}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to update settings: {str(e)}")

    logger.info("Settings amended via API")
