# backend/models/users.py
from sqlalchemy import Column, Integer, String
from database import Base

# Represents a customer account; the password is only ever stored hashed
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    name = Column(String, nullable=True)
