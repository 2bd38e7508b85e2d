from sqlalchemy import Column, Integer, String, Text
from todolist.database import Base

class Task(Base):
    __tablename__ = "todos"
    # ids are never handed out twice, even after the newest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
