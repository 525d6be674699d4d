import os

from app.config import config
from .utils.logger import setup_logger

# Ensure the directories defined in settings.yaml exist at import time so
# that any service can safely assume the folders are present.
for key, path in config.get('base_dirs', {}).items():
    os.makedirs(path, exist_ok=True)

# Log once during package import so we know the package was initialised.
setup_logger('app_init').info('app package initialised with FastAPI backend.')

# ------------------------- FastAPI application ---------------------------

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Create the FastAPI instance
app = FastAPI(title="NRC Data Converter API", version=config.get('api', {}).get('version', 'v1'))

# Allow cross-origin requests from any origin (Streamlit runs on localhost)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


from .api.routes import api_router

app.include_router(api_router)

route_logger = setup_logger('routes')
for route in app.routes:
    if hasattr(route, 'methods'):
        route_logger.info(f"{list(route.methods)}  {route.path}")
