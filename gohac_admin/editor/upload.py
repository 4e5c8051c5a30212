"""
ImageUpload — collaborateur d'upload des champs image.

Le formulaire de bloc ne voit jamais les octets du fichier : l'upload est
délégué à l'API (/v1/upload, /v1/upload/from-url) et seule l'URL stockée
renvoyée est propagée via on_change.
"""
import logging
import mimetypes
from typing import BinaryIO, Callable, Optional

from ..errors import FieldValueError

log = logging.getLogger(__name__)


class ImageUpload:

    def __init__(self, uploads_api, value: str = "",
                 on_change: Optional[Callable[[str], None]] = None, field: str = "image"):
        self.uploads_api = uploads_api
        self.value = value or ""
        self.on_change = on_change
        self.field = field

    def _emit(self, url: str) -> str:
        self.value = url
        if self.on_change is not None:
            self.on_change(url)
        return url

    def upload(self, filename: str, fileobj: BinaryIO, content_type: Optional[str] = None) -> str:
        """Envoie un fichier image, retourne (et propage) l'URL stockée."""
        content_type = content_type or mimetypes.guess_type(filename)[0] or ""
        if not content_type.startswith("image/"):
            raise FieldValueError(self.field, "Please select an image file")
        result = self.uploads_api.upload(filename, fileobj, content_type)
        log.info("Image uploadée : %s → %s", filename, result["url"])
        return self._emit(result["url"])

    def from_url(self, url: str) -> str:
        """Fait télécharger et stocker une image distante par le backend."""
        if not url:
            raise FieldValueError(self.field, "URL requise")
        result = self.uploads_api.from_url(url)
        log.info("Image récupérée depuis %s → %s", url, result["url"])
        return self._emit(result["url"])

    def remove(self) -> str:
        return self._emit("")
