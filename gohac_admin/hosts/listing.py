"""ResourceList — écran liste : chargement, suppression puis rafraîchissement."""
import logging
from typing import Any, Dict, List, Optional

from ..client.api import ResourceAPI
from ..errors import ApiError

log = logging.getLogger(__name__)


class ResourceList:

    def __init__(self, resource: ResourceAPI, **filters):
        self.resource = resource
        self.filters = filters
        self.items: List[Dict[str, Any]] = []
        self.error: Optional[str] = None

    def refresh(self) -> List[Dict[str, Any]]:
        """Recharge la liste ; en cas d'échec, conserve l'erreur et vide la liste."""
        try:
            self.items = self.resource.list(**self.filters)
            self.error = None
        except ApiError as e:
            log.warning("Chargement %s en échec : %s", self.resource.path, e)
            self.items = []
            self.error = str(e)
        return self.items

    def delete(self, resource_id: str) -> List[Dict[str, Any]]:
        """Supprime côté backend puis recharge. Les erreurs de suppression remontent."""
        self.resource.delete(resource_id)
        log.info("%s/%s supprimé", self.resource.path, resource_id)
        return self.refresh()
