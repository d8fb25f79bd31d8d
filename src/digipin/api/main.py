"""FastAPI application for the DIGIPIN codec."""

import logging

from fastapi import FastAPI

from digipin import __version__
from digipin.api.routes import codec
from digipin.config import Config

# Configure logging
logging.basicConfig(
    level=Config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title="DIGIPIN API",
    description="Encode coordinates into DIGIPIN codes and decode them back",
    version=__version__,
)

app.include_router(codec.router)


@app.on_event("startup")
async def startup_event() -> None:
    """Log service startup."""
    logging.info("Starting DIGIPIN API...")


def main() -> None:
    """Run the API server."""
    import uvicorn

    uvicorn.run(
        "digipin.api.main:app",
        host=Config.api_host,
        port=Config.api_port,
        log_level=Config.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
