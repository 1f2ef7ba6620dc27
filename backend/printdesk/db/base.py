"""
Declarative base shared by all table classes
"""
from sqlalchemy.orm import declarative_base

Base = declarative_base()
