"""
Configuration — variables d'environnement lues à l'appel.

  GOHAC_API_URL       base de l'API admin      (http://localhost:3131/api)
  PUBLIC_API_URL      base du site public      (http://localhost:3131)
  GOHAC_HTTP_TIMEOUT  timeout HTTP en secondes (10)
  GOHAC_LOGIN_PATH    page de login admin      (/admin/login)
"""
import logging
import os

log = logging.getLogger(__name__)

DEFAULT_API_URL    = "http://localhost:3131/api"
DEFAULT_PUBLIC_URL = "http://localhost:3131"
DEFAULT_TIMEOUT    = 10.0
DEFAULT_LOGIN_PATH = "/admin/login"


def api_url() -> str:
    return os.getenv("GOHAC_API_URL", DEFAULT_API_URL).rstrip("/")


def public_api_url() -> str:
    return os.getenv("PUBLIC_API_URL", DEFAULT_PUBLIC_URL).rstrip("/")


def http_timeout() -> float:
    raw = os.getenv("GOHAC_HTTP_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        log.warning("GOHAC_HTTP_TIMEOUT invalide (%r) — défaut %ss", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT


def login_path() -> str:
    return os.getenv("GOHAC_LOGIN_PATH", DEFAULT_LOGIN_PATH)
