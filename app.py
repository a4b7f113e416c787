import logging

import streamlit as st
from sqlalchemy.exc import SQLAlchemyError

from tracker.context import TrackerContext
from tracker.data.db import describe_database_target, get_engine, init_db
from tracker.data.repositories import LocalStore
from tracker.header import render_header
from tracker.logging_config import configure_logging
from tracker.router import render_router
from tracker.settings import get_settings
from tracker.state import entries

configure_logging()
logger = logging.getLogger("tracker.app")

IN_MEMORY_DATABASE_URL = "sqlite://"

st.set_page_config(page_title="Happiness Vibe Tracker", page_icon="🌟", layout="centered")


@st.cache_resource(show_spinner=False)
def get_store(database_url, namespace):
    engine = get_engine(database_url)
    init_db(engine)
    return LocalStore(engine, namespace)


settings = get_settings()
durable = True
try:
    store = get_store(settings.database_url, settings.store_namespace)
except SQLAlchemyError:
    logger.exception("Local storage unavailable at %s; falling back to memory", describe_database_target(settings.database_url))
    store = get_store(IN_MEMORY_DATABASE_URL, settings.store_namespace)
    durable = False

entries.ensure_loaded(store, seed=settings.seed_sample_data and durable)

context = TrackerContext(
    store=store,
    storage_label=describe_database_target(settings.database_url),
    durable=durable,
)

render_header(context)
render_router(context)
