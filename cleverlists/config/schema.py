"""Configuration schema for cleverlists."""

from __future__ import annotations

from enum import Enum
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from ..core.parsing import MARKER_TOKEN_PATTERN


class BlankListItemBehaviour(str, Enum):
    """What Enter does on a list item with no content."""

    OUTDENT = "Outdent"
    REMOVE_LIST_ITEM = "Remove List Item"

    @classmethod
    def _missing_(cls, value: object) -> BlankListItemBehaviour | None:
        # Accept "RemoveListItem", "remove-list-item" and similar spellings
        if isinstance(value, str):
            key = "".join(ch for ch in value.lower() if ch.isalpha())
            for member in cls:
                if key == "".join(ch for ch in member.value.lower() if ch.isalpha()):
                    return member
        return None


class ListsConfig(BaseModel):
    """Configuration for list continuation and indentation."""

    blank_list_item_behaviour: BlankListItemBehaviour = BlankListItemBehaviour.OUTDENT
    default_markers: list[str] = Field(default_factory=lambda: ["-"])

    @field_validator("blank_list_item_behaviour", mode="before")
    @classmethod
    def _coerce_behaviour(cls, value: Any) -> Any:
        if isinstance(value, str):
            return BlankListItemBehaviour(value)
        return value

    @field_validator("default_markers")
    @classmethod
    def _check_markers(cls, markers: list[str]) -> list[str]:
        for marker in markers:
            if not MARKER_TOKEN_PATTERN.match(marker.lstrip(" ")):
                raise ValueError(f"Invalid list marker {marker!r}")
        return markers


class EditorConfig(BaseModel):
    """Indentation settings used when cleverlists edits files itself."""

    tab_size: int = Field(default=4, ge=1)
    insert_spaces: bool = True


class Config(BaseModel):
    """Main configuration class for cleverlists."""

    lists: ListsConfig = Field(default_factory=ListsConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for YAML serialization."""
        return {
            "lists": {
                "blank_list_item_behaviour": self.lists.blank_list_item_behaviour.value,
                "default_markers": self.lists.default_markers,
            },
            "editor": {
                "tab_size": self.editor.tab_size,
                "insert_spaces": self.editor.insert_spaces,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create config from a dictionary loaded from YAML.

        Editor setting keys are also accepted in their camelCase form
        (``blankListItemBehaviour``, ``defaultMarkers``, ``tabSize``,
        ``insertSpaces``).
        """
        aliases = {
            "blankListItemBehaviour": "blank_list_item_behaviour",
            "defaultMarkers": "default_markers",
            "tabSize": "tab_size",
            "insertSpaces": "insert_spaces",
        }
        pydantic_data: dict[str, Any] = {}
        for section in ("lists", "editor"):
            section_data = data.get(section)
            if isinstance(section_data, dict):
                pydantic_data[section] = {
                    aliases.get(key, key): value for key, value in section_data.items()
                }
        return cls.model_validate(pydantic_data)

    def to_yaml(self) -> str:
        """Convert config to YAML string."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=False)
