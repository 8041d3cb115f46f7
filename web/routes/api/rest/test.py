# Backend API endpoint for Test table

from fastapi import APIRouter, Depends
from web.routes.api.deps import get_test_service
from web.services.test import TestService


router = APIRouter()

@router.get("/test", name="read_test")
def read_test(service: TestService = Depends(get_test_service)):
    '''
    API to read all rows from `test` database table
    '''

    return service.get_all_tests()
