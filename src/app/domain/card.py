"""Card - contato derivado de cartão de visita, persistido no MongoDB.

Só name e company têm presença exigida na criação. Os demais campos são
texto livre e guardados como chegam (inclusive valores não-string); campos
desconhecidos também são mantidos (extra="allow") e devolvidos nas respostas.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from utils.errors import ValidationError

# Chaves de identificador aceitas na entrada e sempre descartadas
IDENTIFIER_KEYS = frozenset({"id", "_id"})

REQUIRED_FIELDS_MESSAGE = "Nome e empresa não podem ser vazios."


def utcnow_iso() -> str:
    """Timestamp ISO-8601 em UTC com milissegundos e sufixo Z.

    Arredonda para cima: o valor nunca é anterior ao instante da chamada.
    """
    now = datetime.now(UTC)
    remainder = now.microsecond % 1000
    if remainder:
        now += timedelta(microseconds=1000 - remainder)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def strip_identifier(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Copia os campos sem as chaves de identificador."""
    return {key: value for key, value in fields.items() if key not in IDENTIFIER_KEYS}


class Card(BaseModel):
    """Registro de cartão.

    O identificador é atribuído pelo store na criação e nunca muda.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = None
    name: Any
    company: Any
    job_title: Any = Field(None, alias="jobTitle")
    phone_number: Any = Field(None, alias="phoneNumber")
    email: Any = None
    creation_timestamp: Any = Field(None, alias="creationTimestamp")

    @property
    def extra_fields(self) -> dict[str, Any]:
        """Campos suplementares não reconhecidos pelo modelo."""
        return dict(self.model_extra or {})

    def to_document(self) -> dict[str, Any]:
        """Converte para documento do store (sem identificador)."""
        data = self.model_dump(by_alias=True, exclude_unset=True, exclude={"id"})
        data.update(self.extra_fields)
        return strip_identifier(data)

    def to_response(self) -> dict[str, Any]:
        """Representação JSON devolvida pela API (`id` primeiro)."""
        return {"id": self.id, **self.to_document()}

    @classmethod
    def from_document(cls, data: Mapping[str, Any]) -> Card:
        """Cria instância a partir de documento do store (`_id` vira `id`)."""
        fields = strip_identifier(data)
        raw_id = data.get("_id", data.get("id"))
        fields.setdefault("name", None)
        fields.setdefault("company", None)
        return cls(id=str(raw_id) if raw_id is not None else None, **fields)


class CardPatch(BaseModel):
    """Substituição parcial de campos de um Card existente."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: Any = None
    company: Any = None
    job_title: Any = Field(None, alias="jobTitle")
    phone_number: Any = Field(None, alias="phoneNumber")
    email: Any = None
    creation_timestamp: str | None = Field(None, alias="creationTimestamp")

    @field_validator("name", "company", "creation_timestamp")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        """Campos obrigatórios do Card não podem ser anulados."""
        if value is None:
            raise ValueError("campo obrigatório não pode ser nulo")
        return value

    def to_update(self) -> dict[str, Any]:
        """Campos a aplicar com `$set` (apenas os enviados)."""
        data = self.model_dump(by_alias=True, exclude_unset=True)
        data.update(self.model_extra or {})
        return strip_identifier(data)


def build_new_card(fields: Mapping[str, Any]) -> Card:
    """Valida campos de criação e monta o Card com timestamp de criação.

    Raises:
        ValidationError: name/company ausentes ou vazios.
    """
    data = strip_identifier(fields)
    if not _is_filled(data.get("name")) or not _is_filled(data.get("company")):
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    data["creationTimestamp"] = utcnow_iso()
    data.pop("creation_timestamp", None)
    return Card.model_validate(data)


def build_card_patch(fields: Mapping[str, Any]) -> CardPatch:
    """Valida substituição parcial; `to_update()` dá os campos para `$set`.

    Raises:
        ValidationError: campo obrigatório anulado ou timestamp não-string.
    """
    try:
        return CardPatch.model_validate(strip_identifier(fields))
    except PydanticValidationError as exc:
        raise ValidationError(_describe(exc)) from exc


def _is_filled(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return value is not None and value is not False and value != 0


def _describe(exc: PydanticValidationError) -> str:
    fields = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
    return f"Campos inválidos: {', '.join(fields)}." if fields else "Campos inválidos."
