"""
Query-string field mapping for configuration models.

Every configurable attribute is declared once as a ``QueryField`` holding the
query keys it answers to and the functions that turn a query value into the
attribute value and back. A ``FieldResolver`` walks those declarations to
apply single key/value pairs onto a model instance and to render the whole
model as a query string. ``get`` and ``describe`` expose single values and
field documentation to callers such as ``NtfyService.describe_config``.
"""

from dataclasses import dataclass
from typing import Any, Callable, Sequence
from urllib.parse import urlencode

from pydantic import BaseModel, ValidationError

from ntfy_adapter.exceptions import ConfigValidationError

_TRUE_VALUES = {"yes", "y", "true", "1", "on"}
_FALSE_VALUES = {"no", "n", "false", "0", "off"}


# --- Value codecs ---


def parse_str(value: str) -> str:
    return value


def format_str(value: Any) -> str:
    return "" if value is None else str(value)


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"'{value}' is not a valid boolean")


def format_bool(value: bool) -> str:
    return "Yes" if value else "No"


def parse_int(value: str) -> int:
    return int(value.strip())


def parse_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def format_list(value: Sequence[str]) -> str:
    return ",".join(value)


@dataclass(frozen=True)
class QueryField:
    """A model attribute exposed as one or more query keys."""
    attr: str
    keys: tuple[str, ...]
    parse: Callable[[str], Any] = parse_str
    format: Callable[[Any], str] = format_str

    @property
    def key(self) -> str:
        """The canonical key, used when rendering a query string."""
        return self.keys[0]


class FieldResolver:
    """Reads and writes the query fields declared for a pydantic model."""

    def __init__(self, model: type[BaseModel], fields: Sequence[QueryField]):
        self.model = model
        self.fields = tuple(sorted(fields, key=lambda f: f.key))
        self._by_key: dict[str, QueryField] = {}
        for field in self.fields:
            if field.attr not in model.model_fields:
                raise ValueError(f"{model.__name__} has no field named {field.attr}")
            for key in field.keys:
                self._by_key[key.lower()] = field

    def keys(self) -> list[str]:
        """All accepted keys, aliases included."""
        return sorted(self._by_key)

    def _lookup(self, key: str) -> QueryField:
        field = self._by_key.get(key.lower())
        if field is None:
            raise ConfigValidationError(f"{key} is not a valid config key", key=key)
        return field

    def get(self, config: BaseModel, key: str) -> str:
        field = self._lookup(key)
        return field.format(getattr(config, field.attr))

    def apply(self, config: BaseModel, key: str, value: str) -> None:
        """
        Set the attribute behind ``key`` from its query representation.

        Raises:
            ConfigValidationError: if the key is unknown, or the value cannot be
                parsed or is rejected by the model's own validation.
        """
        field = self._lookup(key)
        try:
            setattr(config, field.attr, field.parse(value))
        except ValidationError as exc:
            reason = exc.errors()[0]["msg"]
            raise ConfigValidationError(f"invalid value for {key}: {reason}", key=key) from exc
        except ValueError as exc:
            raise ConfigValidationError(f"invalid value for {key}: {exc}", key=key) from exc

    def resolve(self, config: BaseModel) -> str:
        """Render every declared field as a url-encoded query string."""
        return urlencode([(field.key, field.format(getattr(config, field.attr))) for field in self.fields])

    def describe(self) -> list[dict[str, Any]]:
        """
        Describe each query field for documentation purposes.

        Returns one dict per field with its canonical ``key``, any ``aliases``,
        the formatted ``default`` and the model's ``description``.
        """
        rows = []
        for field in self.fields:
            info = self.model.model_fields[field.attr]
            rows.append({
                "key": field.key,
                "aliases": list(field.keys[1:]),
                "default": field.format(info.get_default(call_default_factory=True)),
                "description": info.description or "",
            })
        return rows
