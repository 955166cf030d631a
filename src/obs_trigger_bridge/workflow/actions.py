from __future__ import annotations

import functools
import operator
from enum import IntFlag
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_serializer, field_validator

from .triggers import Trigger


class KeyModifier(IntFlag):
    NONE = 0
    SHIFT = 1
    ALT = 2
    CONTROL = 4
    COMMAND = 8


SINGLE_MODIFIERS: tuple[KeyModifier, ...] = (
    KeyModifier.SHIFT,
    KeyModifier.ALT,
    KeyModifier.CONTROL,
    KeyModifier.COMMAND,
)


def split_modifiers(value: int) -> list[KeyModifier]:
    """Split a combined flag value into its named single-flag members."""

    if value == 0:
        return [KeyModifier.NONE]
    members = [m for m in SINGLE_MODIFIERS if value & m]
    if functools.reduce(operator.or_, members, 0) != value:
        raise ValueError(f"Unknown key modifier flags: {value!r}")
    return members


class SetSceneAction(BaseModel):
    kind: Literal["set_scene"] = "set_scene"
    scene_name: str

    def describe(self) -> str:
        return self.scene_name


class ToggleSourceFilterAction(BaseModel):
    kind: Literal["toggle_source_filter"] = "toggle_source_filter"
    source_name: str
    filter_name: str
    enable: bool = True

    def describe(self) -> str:
        return f"{self.source_name} {self.filter_name} {self.enable}"


class HotkeySequenceAction(BaseModel):
    """Press a key (e.g. `OBS_KEY_F1`) with up to three held modifiers.

    Modifiers are persisted by name (`["shift", "control"]`).
    """

    kind: Literal["hotkey_sequence"] = "hotkey_sequence"
    hotkey: str
    modifiers: list[KeyModifier] = Field(default_factory=list, max_length=3)

    @field_validator("modifiers", mode="before")
    @classmethod
    def _parse_modifier_names(cls, value: object) -> object:
        if not isinstance(value, list):
            return value
        parsed: list[object] = []
        for item in value:
            if isinstance(item, str):
                try:
                    parsed.append(KeyModifier[item.strip().upper()])
                except KeyError:
                    raise ValueError(f"Unknown key modifier: {item!r}") from None
            elif isinstance(item, int) and not isinstance(item, bool):
                parsed.extend(split_modifiers(int(item)))
            else:
                raise ValueError(f"Unsupported key modifier: {item!r}")
        return parsed

    @field_serializer("modifiers")
    def _dump_modifier_names(self, modifiers: list[KeyModifier]) -> list[str]:
        return [m.name.lower() for m in modifiers if m.name is not None]

    @property
    def modifier_set(self) -> KeyModifier:
        return functools.reduce(operator.or_, self.modifiers, KeyModifier.NONE)

    def describe(self) -> str:
        mods = "".join(
            f"{m.name.lower()} + " for m in self.modifiers if m is not KeyModifier.NONE and m.name
        )
        return mods + self.hotkey


class HotkeyActionAction(BaseModel):
    """Invoke a named hotkey action registered in the production tool."""

    kind: Literal["hotkey_action"] = "hotkey_action"
    action_name: str

    def describe(self) -> str:
        return self.action_name


Action = Annotated[
    SetSceneAction | ToggleSourceFilterAction | HotkeySequenceAction | HotkeyActionAction,
    Field(discriminator="kind"),
]


class MappingEntry(BaseModel):
    """A persisted (trigger, action) pair."""

    trigger: Trigger
    action: Action

    def __str__(self) -> str:
        return f"{self.trigger.value} -> {self.action.describe()}"
