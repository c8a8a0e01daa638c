# src/infrastructure/database/models/base.py
"""
Base Database Model

Declarative base shared by all mapped models.
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
