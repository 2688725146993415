"""Form validation pipeline.

Every declared field is trimmed and checked by a marshmallow schema, so
lengths count the characters the user typed. Values are HTML-escaped
afterwards for storage and redisplay. Marshmallow reports every failing
field at once, so the form comes back with all messages and prior values.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from markupsafe import escape
from marshmallow import Schema
from marshmallow import ValidationError as MarshmallowValidationError


@dataclass
class FormResult:
    """Outcome of validating one submitted form."""

    values: dict[str, str]
    errors: dict[str, list[str]] = field(default_factory=dict)
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(self, name: str, message: str) -> None:
        self.errors.setdefault(name, []).append(message)

    def messages(self) -> list[str]:
        """Flat list of messages in field order, for templates."""

        return [msg for msgs in self.errors.values() for msg in msgs]


def _trim(value: Any) -> str:
    return "" if value is None else str(value).strip()


def sanitize(value: Any) -> str:
    """Trim surrounding whitespace and neutralize HTML-unsafe characters."""

    return str(escape(_trim(value)))


def validate_form(schema: Schema, form: Mapping[str, Any]) -> FormResult:
    trimmed = {name: _trim(form.get(name)) for name in schema.fields}
    result = FormResult(values={name: sanitize(value) for name, value in trimmed.items()})

    try:
        loaded = schema.load(trimmed)
        result.data = {k: sanitize(v) if isinstance(v, str) else v for k, v in loaded.items()}
    except MarshmallowValidationError as exc:
        messages = exc.messages if isinstance(exc.messages, dict) else {"_schema": exc.messages}
        for name, msgs in messages.items():
            for msg in msgs if isinstance(msgs, list) else [msgs]:
                result.add_error(str(name), str(msg))
    return result
