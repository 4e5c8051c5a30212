"""
Application FastAPI de l'éditeur.
Démarrer : uvicorn gohac_admin.web.app:app --reload --port 8002
"""
import logging

from fastapi import FastAPI

from .router import router

log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
    app = FastAPI(title="Gohac Admin — Block Editor", version="0.1.0", docs_url="/docs")
    app.include_router(router)

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "gohac_admin"}

    log.info("Éditeur de blocs monté sur %s", router.prefix)
    return app


app = create_app()
