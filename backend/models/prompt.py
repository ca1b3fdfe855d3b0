from typing import Optional
from pydantic import BaseModel


class AskRequest(BaseModel):
    prompt: Optional[str] = None


class AskResponse(BaseModel):
    text: str
