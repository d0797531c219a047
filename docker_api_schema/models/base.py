"""Base model shared by every Engine API shape."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class EngineModel(BaseModel):
    """Base model with wire-compatible dump settings.

    Fields are declared in snake_case with the Engine's PascalCase name as
    alias. Dumps use the aliases and leave out every field that was never
    set, so an omitted field stays absent while an explicit ``None`` is
    emitted as ``null``. Fields unknown to the model are kept.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Convert to dict using wire names and only the fields that were set."""
        kwargs.setdefault("by_alias", True)
        kwargs.setdefault("exclude_unset", True)
        return super().model_dump(**kwargs)

    def model_dump_json(self, **kwargs) -> str:
        """Convert to JSON using wire names and only the fields that were set."""
        kwargs.setdefault("by_alias", True)
        kwargs.setdefault("exclude_unset", True)
        return super().model_dump_json(**kwargs)


def fold_legacy_key(data: Any, legacy: str, alias: str, name: str) -> Any:
    """Move a misspelled wire key onto its field; the correct spelling wins."""
    if not isinstance(data, dict) or legacy not in data:
        return data
    data = dict(data)
    value = data.pop(legacy)
    if alias not in data and name not in data:
        data[alias] = value
    return data
