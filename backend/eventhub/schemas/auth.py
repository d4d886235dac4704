from typing import Optional
from pydantic import BaseModel, ConfigDict

# Email format is deliberately not validated; the store only enforces uniqueness.

class UserRegister(BaseModel):
    name: str
    email: str
    password: str

class UserLogin(BaseModel):
    email: str
    password: str

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Optional[str] = None
    email: str
