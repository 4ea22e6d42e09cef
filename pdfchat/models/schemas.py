# pdfchat/models/schemas.py
from pydantic import BaseModel
from typing import List, Optional

class AskRequest(BaseModel):
    question: Optional[str] = None

class AskResponse(BaseModel):
    success: bool
    answer: Optional[str] = None
    message: Optional[str] = None

class UploadResponse(BaseModel):
    success: bool
    message: str
    # identifiers stored by this upload; failed files are only named in message
    stored: List[str] = []
