"""
Songbird Server - Routes Package

This package contains the FastAPI routers.
"""
