"""Declarative base shared by all quiz trainer tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
