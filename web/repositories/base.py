from abc import ABC, abstractmethod
from typing import List
from web.models import Record


class RecordRepository(ABC):
    '''
    Read access to a persisted collection of records
    '''

    @abstractmethod
    def find_all(self) -> List[Record]:
        '''
        Returns every record of the collection, in store order
        '''

        pass
