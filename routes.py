# routes.py
from fastapi import FastAPI
from controller.claim_controller import claim_router
from controller.config_controller import config_router


def register_routes(app: FastAPI) -> None:
    """Register & Access control controllers here."""
    app.include_router(claim_router)
    app.include_router(config_router)
