"""
Startup script for jwtguard.

Run this script to start the demo FastAPI application with uvicorn.

Usage:
    python run.py
"""

import uvicorn
from dotenv import load_dotenv

# Load environment variables
load_dotenv(override=True)

from jwtguard.settings import get_server_config


def main():
    """
    Start the FastAPI application.
    """
    config = get_server_config()

    uvicorn.run(
        "jwtguard.api.app:get_app",
        factory=True,
        host=config["host"],
        port=config["port"],
        reload=config["reload"],
        log_level="info"
    )


if __name__ == "__main__":
    main()
