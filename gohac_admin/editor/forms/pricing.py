"""
Formulaire Pricing — plans via Repeater, et pour chaque plan la liste de
features (chaînes) via un second Repeater.
"""
import logging
from typing import Any, Dict, Optional

from ...blocks.base import BlockType, patch
from ...errors import FieldValueError
from ..html import FormField, esc
from ..repeater import Repeater
from .base import ListBlockForm

log = logging.getLogger(__name__)


class PricingForm(ListBlockForm):
    block_type = BlockType.PRICING
    heading = "Pricing Block"
    FIELDS = (
        FormField("title",    "Title",    placeholder="Pricing Section Title"),
        FormField("subtitle", "Subtitle", placeholder="Pricing Section Subtitle"),
    )
    LIST_FIELD = "plans"
    LIST_LABEL = "Pricing Plans"
    ITEM_FIELDS = (
        FormField("name",        "Plan Name",   required=True, placeholder="e.g., Starter, Pro, Enterprise"),
        FormField("price",       "Price",       required=True, placeholder="e.g., $99/month or $999/year"),
        FormField("description", "Description", kind="textarea", rows=2, placeholder="Plan description"),
        FormField("highlighted", "Highlighted Plan", kind="checkbox"),
        FormField("button_text", "Button Text", placeholder="Get Started"),
        FormField("button_url",  "Button URL",  kind="url", placeholder="https://example.com/signup"),
    )
    ADD_BUTTON_TEXT = "Add Pricing Plan"
    EMPTY_MESSAGE = "No pricing plans yet. Add your first plan below."

    @classmethod
    def empty_item(cls) -> Dict[str, Any]:
        return {
            "name": "",
            "price": "",
            "description": "",
            "features": [],
            "button_text": "Get Started",
            "button_url": "",
            "highlighted": False,
        }

    def _plan(self, index: int) -> Optional[Dict[str, Any]]:
        items = self.items
        if not 0 <= index < len(items):
            return None
        return items[index] if isinstance(items[index], dict) else {}

    def features_repeater(self, plan_index: int) -> Optional[Repeater]:
        plan = self._plan(plan_index)
        if plan is None:
            return None
        features = plan.get("features")

        def on_change(new_features):
            current = self._plan(plan_index) or {}
            self.repeater().edit(plan_index, patch(current, "features", new_features))

        return Repeater(
            features if isinstance(features, list) else [],
            empty_item=str,
            on_change=on_change,
            render_item=lambda value, i: self._render_feature(plan_index, value, i),
            add_button_text="+ Add Feature",
            empty_message="No features yet.",
        )

    def add_plan_feature(self, plan_index: int) -> bool:
        rep = self.features_repeater(plan_index)
        if rep is None:
            log.debug("add_plan_feature ignoré : plan %s inexistant", plan_index)
            return False
        rep.add()
        return True

    def change_plan_feature(self, plan_index: int, feature_index: int, value: Any) -> bool:
        if not isinstance(value, str):
            raise FieldValueError("features", f"texte attendu, reçu {type(value).__name__}")
        rep = self.features_repeater(plan_index)
        return rep is not None and rep.edit(feature_index, value)

    def remove_plan_feature(self, plan_index: int, feature_index: int) -> bool:
        rep = self.features_repeater(plan_index)
        return rep is not None and rep.remove(feature_index)

    def _render_feature(self, plan_index: int, value: Any, index: int) -> str:
        name = f"plans[{plan_index}][features][{index}]"
        return (f'<div class="feature-input-row">'
                f'<input type="text" name="{esc(name)}" value="{esc(value)}" placeholder="Feature name">'
                f'</div>')

    def render_item(self, item: Any, index: int) -> str:
        fields = super().render_item(item, index)
        rep = self.features_repeater(index)
        features = rep.render() if rep is not None else ""
        return (f'<div class="pricing-plan-form">{fields}'
                f'<div class="form-group"><label>Features</label>'
                f'<div class="features-list">{features}</div></div></div>')
