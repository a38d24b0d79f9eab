"""
ASGI entry point: uvicorn loans_manager.main:app
"""

from loans_manager.config.logging_config import setup_logging
from loans_manager.config.settings import ApiSettings, get_config
from loans_manager.fastapi_app import create_fastapi_app
from loans_manager.setup.ioc.container import create_container

config = get_config()
setup_logging(config.LOG_LEVEL, config.LOG_PATH or None)

# Create container at module level (before app starts)
# This is required because Dishka adds middleware, which must happen before app starts
container = create_container(ApiSettings.from_config(config))

app = create_fastapi_app(container)
