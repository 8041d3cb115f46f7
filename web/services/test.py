# Service layer for the `test` table

from typing import List
from web.models import Record
from web.repositories.base import RecordRepository


class TestService:
    '''
    Hands out records of the `test` table as read by `repository`
    '''

    __test__ = False # Skip pytest class

    def __init__(self, repository: RecordRepository):
        self.repository = repository

    def get_all_tests(self) -> List[Record]:
        return self.repository.find_all()
