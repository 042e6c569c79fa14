from pydantic import BaseModel

class Message(BaseModel):
    message: str

class Total(BaseModel):
    total: int
