import uvicorn

from wireframe_converter.config import Config
from wireframe_converter.main import create_app


def serve() -> None:
    """Run the converter with settings from the environment / .env"""
    config = Config.from_env()
    print(f"🚀 Serving wireframe converter on {config.host}:{config.port}")
    uvicorn.run(create_app(config), host=config.host, port=config.port)
