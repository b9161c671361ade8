import uvicorn

from notes_api import config


def main() -> None:
    uvicorn.run("notes_api.main:app", host=config.server_host(), port=config.server_port())


if __name__ == "__main__":
    main()
