"""Client REST admin + session d'authentification."""
from .api import (
    ApiClient, ResourceAPI, PostsAPI, MenusAPI, AuthAPI, MediaAPI,
    SettingsAPI, DashboardAPI, UploadsAPI, unwrap_list,
)
from .auth import AuthSession

__all__ = [
    "ApiClient", "ResourceAPI", "PostsAPI", "MenusAPI", "AuthAPI", "MediaAPI",
    "SettingsAPI", "DashboardAPI", "UploadsAPI", "unwrap_list",
    "AuthSession",
]
