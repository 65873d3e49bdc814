import uvicorn
from hrms.core.config import settings
from hrms.core.logging_config import setup_logging


def run_http():
    """Run HTTP server on the configured host and port"""
    print(f"🚀 Starting server on {settings.HOST}:{settings.PORT}...")
    uvicorn.run(
        "hrms.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,  # logging is configured by setup_logging
    )


if __name__ == "__main__":
    setup_logging()
    run_http()
