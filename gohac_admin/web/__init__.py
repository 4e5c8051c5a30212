"""Surface HTTP (FastAPI) de l'éditeur de blocs."""
from .router import router

__all__ = ["router"]
