"""
Routines for loading a :py:class:`~cookdown.recipe.Recipe` from the JSON
produced by a Cooklang parser.

The expected document looks like::

    {
        "ingredients": [
            {"name": "flour", "amount": 2, "units": "cups", "quantity": 2}
        ],
        "cookware": [{"name": "bowl"}],
        "steps": [
            {
                "line": [
                    "Put",
                    {"type": "ingredient", "name": "flour", "amount": "2",
                     "units": "cups"},
                    {"type": "text", "value": "into a"},
                    {"type": "cookware", "name": "bowl"}
                ]
            }
        ],
        "metadata": [{"key": "image", "value": "![](cake.png)"}]
    }

All top-level fields are optional. The ``metadata`` may alternatively be given
as an object mapping keys to a value or a list of values.

Line entries with an unrecognised ``type`` are kept as-is in the resulting
:py:class:`~cookdown.recipe.Step` (where renderers will skip over them).

.. autofunction:: load_recipe

.. autofunction:: recipe_from_dict

.. autofunction:: parse_amount
"""

from typing import Any, List, Mapping, Union, cast

import re

import json

from pathlib import Path

from fractions import Fraction

from cookdown.recipe import (
    Amount,
    Text,
    Ingredient,
    Cookware,
    LineBlock,
    Step,
    Metadata,
    Recipe,
)

from cookdown.exceptions import RecipeLoadError


fraction_pattern = re.compile(
    r"((?P<integer>[0-9]+)[ \t]+)?(?P<numerator>[0-9]+)[ \t]*/[ \t]*(?P<denominator>[1-9][0-9]*)"
)

decimal_pattern = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")


def parse_amount(value: Amount) -> Amount:
    """
    Convert an amount given as a string into a number where it looks like one
    (e.g. '1 1/2', '0.5' or '3'). Non-numerical strings (e.g. 'a pinch') are
    returned stripped but otherwise unchanged, as are values which are already
    numbers.
    """
    if not isinstance(value, str):
        return value

    value = value.strip()

    match = fraction_pattern.fullmatch(value)
    if match is not None:
        integer = int(match["integer"]) if match["integer"] is not None else 0
        return integer + Fraction(int(match["numerator"]), int(match["denominator"]))
    elif decimal_pattern.fullmatch(value):
        if "." in value:
            return float(value)
        else:
            return int(value)
    else:
        return value


def _implied_quantity(amount: Amount) -> Union[int, float, Fraction]:
    if isinstance(amount, str):
        # A textual amount (e.g. 'a pinch') was still given explicitly
        return 1 if amount else 0
    else:
        return amount


def _string(data: Mapping[str, Any], name: str, default: str = "") -> str:
    value = data.get(name, default)
    if value is None:
        return default
    if not isinstance(value, (str, int, float)):
        raise RecipeLoadError(f"Expected '{name}' to be a string, got {value!r}")
    return str(value)


def ingredient_from_dict(data: Mapping[str, Any]) -> Ingredient:
    if not isinstance(data, Mapping):
        raise RecipeLoadError(f"Expected an ingredient object, got {data!r}")

    name = _string(data, "name")
    if not name:
        raise RecipeLoadError(f"Ingredient has no name: {data!r}")

    amount = data.get("amount", "")
    if amount is None:
        amount = ""
    if not isinstance(amount, (str, int, float)) or isinstance(amount, bool):
        raise RecipeLoadError(f"Invalid amount for ingredient {name!r}: {amount!r}")
    amount = parse_amount(amount)

    quantity = data.get("quantity")
    if quantity is None:
        quantity = _implied_quantity(amount)
    elif not isinstance(quantity, (int, float)) or isinstance(quantity, bool):
        raise RecipeLoadError(
            f"Invalid quantity for ingredient {name!r}: {quantity!r}"
        )

    return Ingredient(
        name=name,
        amount=amount,
        units=_string(data, "units"),
        quantity=quantity,
    )


def cookware_from_dict(data: Mapping[str, Any]) -> Cookware:
    if not isinstance(data, Mapping):
        raise RecipeLoadError(f"Expected a cookware object, got {data!r}")
    return Cookware(name=_string(data, "name"))


def line_block_from_json(data: Any) -> LineBlock:
    """
    Convert a single entry of a step's line into a line block. Entries of
    unknown types are returned unchanged.
    """
    if isinstance(data, str):
        return Text(data)
    elif isinstance(data, Mapping):
        block_type = data.get("type")
        if block_type == "text":
            return Text(_string(data, "value"))
        elif block_type == "ingredient":
            return ingredient_from_dict(data)
        elif block_type == "cookware":
            return cookware_from_dict(data)

    return cast(LineBlock, data)


def step_from_json(data: Any) -> Step:
    # Steps may be given either as {"line": [...]} or just [...]
    if isinstance(data, Mapping):
        data = data.get("line", [])
    if not isinstance(data, list):
        raise RecipeLoadError(f"Expected a list of line blocks, got {data!r}")
    return Step([line_block_from_json(block) for block in data])


def metadata_from_json(data: Any) -> List[Metadata]:
    if isinstance(data, Mapping):
        metadata = []
        for key, value in data.items():
            values = value if isinstance(value, list) else [value]
            metadata.extend(Metadata(str(key), str(v)) for v in values)
        return metadata
    elif isinstance(data, list):
        metadata = []
        for entry in data:
            if not isinstance(entry, Mapping) or "key" not in entry:
                raise RecipeLoadError(f"Expected a metadata object, got {entry!r}")
            metadata.append(Metadata(_string(entry, "key"), _string(entry, "value")))
        return metadata
    else:
        raise RecipeLoadError(f"Expected metadata list or object, got {data!r}")


def _list(data: Mapping[str, Any], name: str) -> List[Any]:
    value = data.get(name)
    if value is None:
        return []
    if not isinstance(value, list):
        raise RecipeLoadError(f"Expected '{name}' to be a list, got {value!r}")
    return value


def recipe_from_dict(data: Mapping[str, Any]) -> Recipe:
    """
    Build a :py:class:`~cookdown.recipe.Recipe` from a decoded JSON document.

    Raises
    ======
    RecipeLoadError
        If the document does not have the expected shape.
    """
    if not isinstance(data, Mapping):
        raise RecipeLoadError(f"Expected a recipe object, got {data!r}")

    return Recipe(
        steps=[step_from_json(step) for step in _list(data, "steps")],
        ingredients=[ingredient_from_dict(i) for i in _list(data, "ingredients")],
        cookware=[cookware_from_dict(c) for c in _list(data, "cookware")],
        metadata=metadata_from_json(data.get("metadata") or []),
    )


def load_recipe(path: Path) -> Recipe:
    """
    Load a recipe from a JSON file.

    Raises
    ======
    RecipeLoadError
        If the file cannot be read or does not contain a valid recipe.
    """
    try:
        with path.open() as f:
            data = json.load(f)
    except OSError as e:
        raise RecipeLoadError(f"Could not read {path}: {e}")
    except json.JSONDecodeError as e:
        raise RecipeLoadError(f"{path} is not valid JSON: {e}")

    return recipe_from_dict(data)
