"""
Helpers de données du site public (thème).

Réglages globaux et menus via /api/public/* ; en cas d'échec, l'erreur est
journalisée et des valeurs par défaut sont renvoyées pour que le rendu du
site ne casse pas.
"""
import logging
from typing import List, Optional

import requests
from pydantic import BaseModel, Field, ValidationError

from . import config

log = logging.getLogger(__name__)

DEFAULT_SITE_NAME = "Gohac CMS"


class GlobalSettings(BaseModel):
    site_name: str = DEFAULT_SITE_NAME
    logo: str = ""
    favicon: str = ""
    contact_email: str = ""
    header_menu_id: Optional[str] = None
    footer_menu_id: Optional[str] = None


class MenuItem(BaseModel):
    label: str
    url: str
    target: Optional[str] = None
    children: List["MenuItem"] = Field(default_factory=list)


class Menu(BaseModel):
    id: str = ""
    name: str = ""
    description: Optional[str] = None
    items: List[MenuItem] = Field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""


def _fetch(path: str, base_url: Optional[str]) -> dict:
    url = f"{(base_url or config.public_api_url()).rstrip('/')}/api/public/{path}"
    resp = requests.get(url, timeout=config.http_timeout())
    if not resp.ok:
        raise requests.HTTPError(f"Failed to fetch {path}: {resp.status_code} {resp.reason}", response=resp)
    return resp.json()


def get_global_settings(base_url: Optional[str] = None) -> GlobalSettings:
    try:
        return GlobalSettings.model_validate(_fetch("settings", base_url))
    except (requests.RequestException, ValueError, ValidationError) as e:
        log.error("Error fetching global settings: %s", e)
        return GlobalSettings()


def get_menu_by_id(menu_id: str, base_url: Optional[str] = None) -> Menu:
    try:
        return Menu.model_validate(_fetch(f"menus/{menu_id}", base_url))
    except (requests.RequestException, ValueError, ValidationError) as e:
        log.error("Error fetching menu %s: %s", menu_id, e)
        return Menu()
