import uvicorn

from wireframe_converter.config import Config
from wireframe_converter.main import create_app


def main() -> None:
    config = Config.from_env()
    uvicorn.run(create_app(config), host=config.host, port=config.port)


if __name__ == "__main__":
    main()
