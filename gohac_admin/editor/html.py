"""
Helpers HTML des formulaires d'édition.
Toutes les valeurs utilisateur passent par esc().
"""
from html import escape
from typing import Any, NamedTuple, Tuple

TRUE_STRINGS  = frozenset({"1", "true", "on", "yes"})
FALSE_STRINGS = frozenset({"", "0", "false", "off", "no"})


class FormField(NamedTuple):
    """Descripteur d'un champ de formulaire de bloc."""
    name: str
    label: str
    kind: str = "text"          # text | url | textarea | select | checkbox | number | image
    required: bool = False
    choices: Tuple[Any, ...] = ()
    placeholder: str = ""
    help: str = ""
    rows: int = 3


def esc(value: Any) -> str:
    return escape("" if value is None else str(value), quote=True)


def _attr(name: str, value: Any) -> str:
    return f' {name}="{esc(value)}"' if value not in (None, "") else ""


def is_checked(value: Any) -> bool:
    """Etat d'une case à cocher : booléen, ou chaîne "true"/"on"/"1"…"""
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


def render_field(field: FormField, value: Any, dom_id: str, name: str = "") -> str:
    """Rend un form-group complet (label + contrôle) pour un FormField."""
    name = name or field.name
    req = " required" if field.required else ""
    label_text = esc(field.label) + (" *" if field.required else "")

    if field.kind == "checkbox":
        checked = " checked" if is_checked(value) else ""
        return (f'<div class="form-group"><label>'
                f'<input type="checkbox" id="{esc(dom_id)}" name="{esc(name)}"{checked}> {esc(field.label)}'
                f'</label></div>')

    if field.kind == "textarea":
        control = (f'<textarea id="{esc(dom_id)}" name="{esc(name)}" rows="{field.rows}"'
                   f'{_attr("placeholder", field.placeholder)}{req}>{esc(value)}</textarea>')
    elif field.kind == "select":
        current = value if value not in (None, "") else (field.choices[0] if field.choices else "")
        options = "".join(
            f'<option value="{esc(c)}"{" selected" if str(c) == str(current) else ""}>'
            f'{esc(str(c).capitalize())}</option>'
            for c in field.choices
        )
        control = f'<select id="{esc(dom_id)}" name="{esc(name)}"{req}>{options}</select>'
    else:
        input_type = {"url": "url", "number": "number", "image": "url"}.get(field.kind, "text")
        control = (f'<input type="{input_type}" id="{esc(dom_id)}" name="{esc(name)}"'
                   f' value="{esc(value)}"{_attr("placeholder", field.placeholder)}{req}>')

    help_html = f"<small>{esc(field.help)}</small>" if field.help else ""
    preview = ""
    if field.kind == "image" and value:
        preview = f'<div class="image-preview"><img src="{esc(value)}" alt="Preview"></div>'

    return (f'<div class="form-group"><label for="{esc(dom_id)}">{label_text}</label>'
            f'{control}{help_html}{preview}</div>')
