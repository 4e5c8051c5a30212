"""
AuthSession — état d'authentification de l'admin.

Envoie les identifiants, conserve l'utilisateur courant, et réagit au signal
"session expirée" du client (401) : l'utilisateur est oublié et le callback
de navigation on_expired reçoit le chemin de login.
"""
import logging
from typing import Callable, Optional

from .. import config
from ..errors import ApiError, LoginError, NotAuthenticated
from .api import ApiClient

log = logging.getLogger(__name__)


class AuthSession:

    def __init__(self, api: ApiClient, on_expired: Optional[Callable[[str], None]] = None,
                 login_path: Optional[str] = None):
        self.api = api
        self.on_expired = on_expired
        self.login_path = login_path or config.login_path()
        self.user: Optional[dict] = None
        api.on_session_expired = self._session_expired

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def _session_expired(self, _response) -> None:
        self.user = None
        if self.on_expired is not None:
            self.on_expired(self.login_path)

    def _fetch_user(self) -> Optional[dict]:
        body = self.api.auth.me() or {}
        return body.get("user") if isinstance(body, dict) else None

    def check(self) -> Optional[dict]:
        """Vérifie la session backend au démarrage ; anonyme en cas d'échec."""
        try:
            self.user = self._fetch_user()
        except ApiError as e:
            log.info("Session non authentifiée : %s", e)
            self.user = None
        return self.user

    def login(self, email: str, password: str) -> dict:
        try:
            body = self.api.auth.login(email, password) or {}
            if not body.get("success"):
                raise LoginError(body.get("error") or "Login failed")
            user = self._fetch_user()
        except ApiError as e:
            raise LoginError(str(e) or "Login failed") from e
        if not user:
            raise LoginError("Login failed")
        self.user = user
        log.info("Connecté : %s", user.get("email"))
        return user

    def logout(self) -> None:
        try:
            self.api.auth.logout()
        except ApiError as e:
            log.warning("Logout backend en échec : %s", e)
        finally:
            self.user = None

    def require_user(self) -> dict:
        """Garde de routage : utilisateur courant ou NotAuthenticated."""
        if self.user is None:
            raise NotAuthenticated(self.login_path)
        return self.user
