"""Formulaire Profil — nom et changement de mot de passe de l'utilisateur courant."""
import logging
from typing import Any, Dict, Optional

from ..client.auth import AuthSession
from ..errors import FormError

log = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class ProfileEditor:
    """
    Pré-rempli depuis AuthSession.user. Seuls les champs modifiés sont
    envoyés ; les deux champs mot de passe sont vidés après un envoi réussi.
    """

    def __init__(self, auth: AuthSession):
        self.auth = auth
        self.name = ""
        self.email = ""
        self.password = ""
        self.confirm_password = ""

    def load(self) -> Dict[str, Any]:
        user = self.auth.require_user()
        self.name = user.get("name") or ""
        self.email = user.get("email") or ""
        return user

    def validate(self) -> None:
        if self.password and len(self.password) < MIN_PASSWORD_LENGTH:
            raise FormError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")
        if self.password and self.password != self.confirm_password:
            raise FormError("Passwords do not match.")

    def changes(self) -> Dict[str, str]:
        user = self.auth.user or {}
        data = {}
        if self.name.strip() and self.name != user.get("name"):
            data["name"] = self.name.strip()
        if self.password.strip():
            data["password"] = self.password.strip()
        return data

    def submit(self) -> Optional[Dict[str, Any]]:
        """Envoie les modifications ; None s'il n'y a rien à enregistrer."""
        self.validate()
        data = self.changes()
        if not data:
            log.info("Profil : aucune modification")
            return None
        result = self.auth.api.auth.update_profile(**data)
        self.password = ""
        self.confirm_password = ""
        self.auth.check()
        log.info("Profil mis à jour (%s)", ", ".join(sorted(data)))
        return result
