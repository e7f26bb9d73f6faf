# models.py
from sqlalchemy import Column, Integer
from database import Base


class Car(Base):
    __tablename__ = "car"
    id = Column(Integer, primary_key=True, index=True)
    # Owners live in another system; only the id is stored here
    owner_id = Column(Integer, nullable=True)
