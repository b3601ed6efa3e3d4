"""
Settings controlling how recipes are rendered.

.. autoclass:: StepStyle
    :members:

.. autoclass:: RenderSettings
    :members:

.. autofunction:: load_settings
"""

from typing import Any, Mapping

import json

from enum import Enum

from pathlib import Path

from dataclasses import dataclass, fields, replace

from cookdown.exceptions import SettingsError


class StepStyle(Enum):
    """How the steps of a recipe are laid out."""

    ORDERED = "ordered"
    """As a numbered (``<ol>``) list."""

    UNORDERED = "unordered"
    """As a bulleted (``<ul>``) list."""

    PARAGRAPHS = "paragraphs"
    """As a series of paragraphs."""


@dataclass(frozen=True)
class RenderSettings:
    ingredients_heading: str = "Ingredients"
    cookware_heading: str = "Cookware"
    steps_heading: str = "Steps"
    image_heading: str = "Image"

    heading_level: int = 2
    """The markdown heading level (1-6) used for section headings."""

    step_style: StepStyle = StepStyle.ORDERED

    def __post_init__(self) -> None:
        for name in (
            "ingredients_heading",
            "cookware_heading",
            "steps_heading",
            "image_heading",
        ):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise SettingsError(f"{name} must be a string, got {value!r}")
        # NB: bool is a subclass of int
        if (
            not isinstance(self.heading_level, int)
            or isinstance(self.heading_level, bool)
            or not (1 <= self.heading_level <= 6)
        ):
            raise SettingsError(
                f"heading_level must be between 1 and 6, got {self.heading_level!r}"
            )
        if not isinstance(self.step_style, StepStyle):
            try:
                object.__setattr__(self, "step_style", StepStyle(self.step_style))
            except ValueError:
                raise SettingsError(
                    f"step_style must be one of "
                    f"{', '.join(s.value for s in StepStyle)}, "
                    f"got {self.step_style!r}"
                )


DEFAULT_SETTINGS = RenderSettings()


def settings_from_dict(
    data: Mapping[str, Any], defaults: RenderSettings = DEFAULT_SETTINGS
) -> RenderSettings:
    """
    Return a copy of ``defaults`` with the values in ``data`` substituted in.
    """
    if not isinstance(data, Mapping):
        raise SettingsError(f"Expected a settings object, got {data!r}")

    known = {f.name for f in fields(RenderSettings)}
    unknown = set(data) - known
    if unknown:
        raise SettingsError(f"Unknown settings: {', '.join(sorted(unknown))}")

    return replace(defaults, **data)


def load_settings(path: Path) -> RenderSettings:
    """
    Load settings from a JSON file. Any settings not given in the file take
    their default values.
    """
    try:
        with path.open() as f:
            data = json.load(f)
    except OSError as e:
        raise SettingsError(f"Could not read {path}: {e}")
    except json.JSONDecodeError as e:
        raise SettingsError(f"{path} is not valid JSON: {e}")

    return settings_from_dict(data)
