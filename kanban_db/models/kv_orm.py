"""SQLAlchemy ORM model for the persistent key-value table"""
from sqlalchemy import Column, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class KeyValueORM(Base):
    """One key-value pair; every namespace shares this table"""
    __tablename__ = 'kv_items'

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)

    def __repr__(self):
        return f"<KeyValueORM(key='{self.key}')>"
