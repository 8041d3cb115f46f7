from typing import Optional
from fastapi import FastAPI
from common.config.constants import TEST_TABLE, LOG_LEVEL
from common.utils.logutils import create_logger
from web.config.constants import API_PREFIX, API_TITLE
from web.db.session import SessionLocal
from web.repositories.test import TestRepository
from web.routes.api.api import api_router
from web.services.test import TestService


logger = create_logger("web.main", log_level=LOG_LEVEL)


def create_app(service: Optional[TestService] = None) -> FastAPI:
    '''
    Builds the FastAPI app and wires its collaborators once

    :params:
        `service`: TestService obj; if None, one is built on top of
            a `TestRepository` bound to the configured database
    '''

    if service is None:
        service = TestService(TestRepository(SessionLocal, TEST_TABLE))
        logger.info(f"Serving records of table {TEST_TABLE}")

    app = FastAPI(title=API_TITLE, openapi_url=f"{API_PREFIX}/openapi.json")
    app.state.test_service = service
    app.include_router(api_router, prefix=API_PREFIX)
    return app


app = create_app()
