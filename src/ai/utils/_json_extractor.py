"""Extrator de JSON de respostas de LLM.

Remove cercas de markdown ao redor da resposta e parseia o restante.
Sem heurística de recuperação: JSON inválido é erro do chamador.
"""

from __future__ import annotations

import json
import re
from typing import Any

from utils.errors import MalformedModelOutputError

_LEADING_FENCE = re.compile(r"^\s*```(?:json)?[ \t]*\n?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```\s*$")


def strip_code_fences(response: str) -> str:
    """Remove cercas ``` (opcionalmente ```json) no início/fim e whitespace.

    Exemplo:
        strip_code_fences('```json\\n{"name": "A"}\\n```') == '{"name": "A"}'
    """
    text = _LEADING_FENCE.sub("", response, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def parse_json_object(response: str) -> dict[str, Any]:
    """Parseia resposta (com ou sem cercas) como objeto JSON.

    Raises:
        MalformedModelOutputError: texto não é JSON válido ou não é objeto.
    """
    text = strip_code_fences(response or "")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedModelOutputError(
            "Resposta do modelo não é um JSON válido."
        ) from exc

    if not isinstance(data, dict):
        raise MalformedModelOutputError("Resposta do modelo não é um objeto JSON.")
    return data
