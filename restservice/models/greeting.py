# restservice/models/greeting.py

from pydantic import BaseModel


class Greeting(BaseModel):
    id: int
    content: str
