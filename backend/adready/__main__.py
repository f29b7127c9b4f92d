"""
Run the API server: ``python -m adready``.
"""
import uvicorn

from adready.config import settings


def main() -> None:
    uvicorn.run("adready.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
