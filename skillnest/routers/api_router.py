from fastapi import APIRouter
from skillnest.routers import functions, records

# Centralized API router hub: main.py only imports this module.
api_router = APIRouter()

api_router.include_router(functions.router, tags=["AI Functions"])
api_router.include_router(records.router, tags=["Records"])
