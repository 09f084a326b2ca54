from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.v1.public.router import router as public_router


def create_app() -> FastAPI:
    app = FastAPI(title="Academic Catalog")

    # Public API is read-only; origin checks happen in check_origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(public_router)

    return app


app = create_app()
