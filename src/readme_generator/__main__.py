import uvicorn

from readme_generator import config


def main() -> None:
    cfg = config.get_config().server
    uvicorn.run("readme_generator.api:app", host=cfg.host, port=cfg.port)


if __name__ == "__main__":
    main()
