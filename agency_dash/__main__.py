import uvicorn

from agency_dash.core.config import settings


def main():
    uvicorn.run("agency_dash.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
