"""
Run the calculator service under uvicorn.
"""
import uvicorn

from .config import HOST, PORT
from .main import app


def main():
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
