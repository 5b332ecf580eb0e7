from typing import Optional

from fastapi import FastAPI
from mangum import Mangum

from lunch_center.api.v1 import api_router
from lunch_center.core.config import Settings, get_settings
from lunch_center.core.log import setup_logging
from lunch_center.core.security import setup_exception_handlers, setup_middlewares
from lunch_center.database import create_session_factory


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(title="Lunch Solution Center")
    app.state.settings = settings
    app.state.session_factory = create_session_factory(settings)

    setup_middlewares(app, settings)
    setup_exception_handlers(app, settings)

    app.include_router(api_router)

    return app


app = create_app()

handler = Mangum(app)
