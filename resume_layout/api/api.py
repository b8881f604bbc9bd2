# File: resume_layout/api/api.py
from fastapi import APIRouter

from resume_layout.api.endpoints import documents

api_router = APIRouter(prefix="/api")
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
