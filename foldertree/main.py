import uvicorn

from foldertree.configs.settings import settings, ensure_required_settings
from foldertree.configs.setup import create_app

app = create_app()


def run() -> None:
    """Console entry point"""
    ensure_required_settings()
    uvicorn.run(
        "foldertree.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.APP_DEBUG,
    )


if __name__ == "__main__":
    run()
