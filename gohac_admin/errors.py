"""
Exceptions gohac_admin.

Les opérations d'édition sur index (update/remove/move) ne lèvent jamais :
un index hors limites est un no-op. Les exceptions ci-dessous couvrent les
entrées réellement invalides (type de bloc inconnu, valeur de champ hors
choix) et les échecs côté API REST.
"""
from typing import Optional


class GohacError(Exception):
    """Racine de toutes les erreurs gohac_admin."""


class UnknownBlockTypeError(GohacError, ValueError):
    def __init__(self, block_type):
        self.block_type = block_type
        super().__init__(f"Unknown block type: {block_type!r}")


class FieldValueError(GohacError, ValueError):
    """Valeur refusée par un formulaire de bloc (champ inconnu, choix invalide…)."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class ApiError(GohacError):
    """Réponse non-2xx (ou échec réseau, status=None) de l'API REST."""

    def __init__(self, message: str, status: Optional[int] = None, payload=None):
        self.status = status
        self.payload = payload
        super().__init__(message)


class SessionExpired(ApiError):
    """401 — la session backend n'est plus valide."""


class LoginError(GohacError):
    pass


class NotAuthenticated(GohacError):
    pass


class FormError(GohacError):
    """Validation d'un formulaire hôte (page, article, catégorie…) échouée."""
