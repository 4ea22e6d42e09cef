# pdfchat/api/v1/router.py
from fastapi import APIRouter
from pdfchat.api.v1.endpoints import document, query

api_router = APIRouter()
api_router.include_router(document.router, tags=["Document Processing"])
api_router.include_router(query.router, tags=["Q&A"])
