# Dependencies for backend API

from fastapi import Request
from web.services.test import TestService


def get_test_service(request: Request) -> TestService:
    return request.app.state.test_service
