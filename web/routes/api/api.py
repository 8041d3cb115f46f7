from fastapi import APIRouter
from web.routes.api.rest import test as test_rest

api_router = APIRouter()
api_router.include_router(test_rest.router, tags=["api_test_rest"])
