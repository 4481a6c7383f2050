from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.v1.router import build_api_router
from app.core.config import settings
from app.core.logging import configure_logging
from app.db.init_db import init_db

configure_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    application = FastAPI(title=settings.PROJECT_NAME, debug=settings.DEBUG, lifespan=lifespan)

    allow_origins = settings.CORS_ORIGINS
    allow_credentials = '*' not in allow_origins

    application.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=allow_credentials,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    application.include_router(build_api_router())

    @application.get('/', include_in_schema=False)
    def welcome() -> dict:
        prefix = settings.API_V1_PREFIX
        return {
            'message': f'Welcome to the {settings.PROJECT_NAME}',
            'endpoints': {
                'authentication': f'{prefix}/auth',
                'users': f'{prefix}/users',
                'skills': f'{prefix}/skills',
                'search': f'{prefix}/search',
                'swap_requests': f'{prefix}/swap-requests',
            },
        }

    return application


app = create_app()
