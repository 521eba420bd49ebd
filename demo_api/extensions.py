from flask import current_app
from flask_cors import CORS

from .store import Store

STORE_KEY = "demo_api.store"

cors = CORS()


def init_store(app, store: Store = None) -> Store:
    store = store if store is not None else Store()
    if app.config.get("SEED_DATA", True):
        store.seed()
    app.extensions[STORE_KEY] = store
    return store


def get_store() -> Store:
    return current_app.extensions[STORE_KEY]
