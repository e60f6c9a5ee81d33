# backend/routers/dependencies.py

from fastapi import Request

from utils.data_store import PropertyStore
from utils.settings import Settings


def get_store(request: Request) -> PropertyStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
