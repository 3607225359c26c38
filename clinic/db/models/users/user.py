# clinic/db/models/users/user.py
from sqlmodel import SQLModel, Field

class User(SQLModel, table=True):
    __tablename__ = "users"
    username: str = Field(primary_key=True, max_length=100)
    password: str = Field(max_length=64)  # sha256 hex digest
