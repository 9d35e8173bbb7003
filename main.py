import uvicorn

from app.core.config import load_settings


def main() -> None:
    settings = load_settings()
    reload_enabled = not settings.is_production
    uvicorn.run(
        "app.factory:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=reload_enabled,
        ssl_certfile=settings.ssl_certfile if settings.tls_enabled else None,
        ssl_keyfile=settings.ssl_keyfile if settings.tls_enabled else None,
    )


if __name__ == "__main__":
    main()
