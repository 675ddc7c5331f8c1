# productstore/main.py
import uvicorn

from productstore.api import create_app
from productstore.utils.settings import HOST, PORT
from productstore.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()


if __name__ == "__main__":
    logger.info(f"Server is running on http://{HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
