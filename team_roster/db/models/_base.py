# db/models/_base.py
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
