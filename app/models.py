from dataclasses import dataclass, field
from typing import Annotated, Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import DecodeError

Int64 = Annotated[int, Field(ge=-(2 ** 63), le=2 ** 63 - 1)]

# Exemplo de payload do Grafana (legacy alerting):
# {
#   "dashboardId": 1,
#   "evalMatches": [{"value": 1, "metric": "Count", "tags": {}}],
#   "imageUrl": "https://grafana.com/assets/img/blog/mixed_styles.png",
#   "message": "Notification Message",
#   "orgId": 1,
#   "panelId": 2,
#   "ruleId": 1,
#   "ruleName": "Panel Title alert",
#   "ruleUrl": "http://localhost:3000/d/hZ7BuVbWz/test-dashboard?...",
#   "state": "alerting",
#   "tags": {"tag name": "tag value"},
#   "title": "[Alerting] Panel Title alert"
# }


def _lookup(data, key):
    """Busca a chave priorizando o nome exato e depois sem diferenciar caixa."""
    if key in data:
        return data[key]
    lowered = key.lower()
    for candidate, value in data.items():
        if candidate.lower() == lowered:
            return value
    return None


class Alert(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True, populate_by_name=True)

    dashboard_id: Int64 = Field(0, alias="dashboardId")
    eval_matches: List[Dict[str, Any]] = Field(default_factory=list, alias="evalMatches")
    image_url: str = Field("", alias="imageUrl")
    message: str = ""
    org_id: Int64 = Field(0, alias="orgId")
    panel_id: Int64 = Field(0, alias="panelID")
    rule_id: Int64 = Field(0, alias="ruleID")
    rule_name: str = Field("", alias="ruleName")
    rule_url: str = Field("", alias="ruleUrl")
    state: str = ""
    tags: Dict[str, str] = Field(default_factory=dict)
    title: str = ""

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, data):
        # Campos null ficam com o valor zero; chaves desconhecidas são ignoradas
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        normalized = {}
        for name, info in cls.model_fields.items():
            key = info.alias or name
            value = _lookup(data, key)
            if value is not None:
                normalized[key] = value
        return normalized

    @field_validator("eval_matches", mode="before")
    @classmethod
    def null_match_as_empty(cls, value):
        if isinstance(value, list):
            return [{} if item is None else item for item in value]
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def null_tag_as_empty(cls, value):
        if isinstance(value, dict):
            return {name: "" if tag is None else tag for name, tag in value.items()}
        return value

    @classmethod
    def from_dict(cls, data):
        """Valida o JSON já decodificado; qualquer erro de tipo vira ``DecodeError``."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"invalid alert payload: {e}") from e


# Widgets do Google Chat (cards v1)

@dataclass(frozen=True)
class TextParagraph:
    text: str

    def to_dict(self):
        return {"textParagraph": {"text": self.text}}


@dataclass(frozen=True)
class TextButton:
    text: str
    url: str

    def to_dict(self):
        return {
            "textButton": {
                "text": self.text,
                "onClick": {"openLink": {"url": self.url}},
            }
        }


@dataclass(frozen=True)
class Buttons:
    buttons: Tuple[TextButton, ...]

    def to_dict(self):
        return {"buttons": [button.to_dict() for button in self.buttons]}


@dataclass(frozen=True)
class Image:
    image_url: str

    def to_dict(self):
        return {"image": {"imageUrl": self.image_url}}


@dataclass(frozen=True)
class KeyValue:
    top_label: str
    content: str
    content_multiline: bool = True

    def to_dict(self):
        return {
            "keyValue": {
                "topLabel": self.top_label,
                "content": self.content,
                "contentMultiline": self.content_multiline,
            }
        }


@dataclass
class Section:
    widgets: List[Any] = field(default_factory=list)

    def to_dict(self):
        return {"widgets": [widget.to_dict() for widget in self.widgets]}


@dataclass
class Card:
    sections: List[Section] = field(default_factory=list)

    def to_dict(self):
        return {"sections": [section.to_dict() for section in self.sections]}


@dataclass
class ChatMessage:
    text: str = ""
    cards: List[Card] = field(default_factory=list)

    def to_dict(self):
        return {
            "text": self.text,
            "cards": [card.to_dict() for card in self.cards],
        }
