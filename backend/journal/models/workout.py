from sqlalchemy import Column, Integer, String, Date, Boolean
from sqlalchemy.sql import false
from journal.core.constants import NAME_MAX_LENGTH
from journal.db import Base


class Workout(Base):
    __tablename__ = "workouts"
    # SQLite: never hand out an id again after its row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(NAME_MAX_LENGTH), nullable=False)

    # NULL means "not recorded"; 0 is displayed the same way
    reps = Column(Integer, nullable=True)
    weight = Column(Integer, nullable=True)

    date = Column(Date, nullable=True)

    # Units of `weight`: true = lbs, false = kgs
    lbs = Column(Boolean, nullable=False, default=False, server_default=false())
