import uvicorn

from beerstock.core.config import settings


def main():
    uvicorn.run("beerstock.main:app", host="0.0.0.0", port=settings.SERVER_PORT)


if __name__ == "__main__":
    main()
