r"""
The :py:mod:`cookdown.recipe` module defines the data structure used to
describe a parsed Cooklang recipe.


Overview
========

A :py:class:`Recipe` holds the ingredients, cookware, steps and metadata
produced by a Cooklang parser. For example, the recipe source::

    Put @flour{2%cups} into a #bowl{} and add @salt.

    >> image: ![](cake.png)

Would be represented as::

    Recipe(
        ingredients=[
            Ingredient("flour", 2, "cups", 2),
            Ingredient("salt"),
        ],
        cookware=[Cookware("bowl")],
        steps=[
            Step([
                Text("Put"),
                Ingredient("flour", 2, "cups", 2),
                Text("into a"),
                Cookware("bowl"),
                Text("and add"),
                Ingredient("salt"),
                Text("."),
            ]),
        ],
        metadata=[Metadata("image", "![](cake.png)")],
    )

All of these objects are immutable: renderers only ever read them.


Line blocks
===========

The contents of a :py:class:`Step` is a sequence of 'line blocks', each of
which is one of :py:class:`Text`, :py:class:`Ingredient` or
:py:class:`Cookware`. Every line block carries a :py:attr:`kind` tag
(a :py:class:`BlockKind`) which renderers should use to tell them apart.

.. autoclass:: BlockKind
    :members:

.. autoclass:: Text
    :members:

.. autoclass:: Ingredient
    :members:

.. autoclass:: Cookware
    :members:

.. autodata:: LineBlock


Recipes
=======

.. autoclass:: Step
    :members:

.. autoclass:: Metadata
    :members:

.. autoclass:: Recipe
    :members:
"""

from typing import List, Union

from enum import Enum, auto

from fractions import Fraction

from dataclasses import dataclass, field

__all__ = [
    "Amount",
    "BlockKind",
    "Text",
    "Ingredient",
    "Cookware",
    "LineBlock",
    "Step",
    "Metadata",
    "Recipe",
]


Amount = Union[int, float, Fraction, str]
"""
An ingredient amount. Usually numerical, though parsers may pass through
non-numerical amounts (e.g. "a pinch") as strings.
"""


class BlockKind(Enum):
    """The kinds of line block which may appear in a :py:class:`Step`."""

    TEXT = auto()
    INGREDIENT = auto()
    COOKWARE = auto()


@dataclass(frozen=True)
class Text:
    """A span of plain text within a step."""

    value: str

    kind: BlockKind = field(default=BlockKind.TEXT, init=False, repr=False)


@dataclass(frozen=True)
class Ingredient:
    """
    An ingredient, either as listed in a :py:class:`Recipe` or as referenced
    within a :py:class:`Step`.
    """

    name: str
    """The ingredient name. Never empty."""

    amount: Amount = ""
    """The amount of the ingredient to use."""

    units: str = ""
    """The units of :py:attr:`amount`. May be empty for unitless amounts."""

    quantity: Union[int, float, Fraction] = 0
    """
    If greater than zero, indicates that :py:attr:`amount` and
    :py:attr:`units` were given explicitly and should be displayed.
    """

    kind: BlockKind = field(default=BlockKind.INGREDIENT, init=False, repr=False)


@dataclass(frozen=True)
class Cookware:
    """A piece of cookware."""

    name: str

    kind: BlockKind = field(default=BlockKind.COOKWARE, init=False, repr=False)


LineBlock = Union[Text, Ingredient, Cookware]
"""One atomic part of a :py:class:`Step`."""


@dataclass(frozen=True)
class Step:
    """A single step of a recipe."""

    line: List[LineBlock] = field(default_factory=list)
    """The line blocks making up this step, in the order they should be shown."""


@dataclass(frozen=True)
class Metadata:
    """
    A metadata key/value pair.

    The key ``image`` is used for markdown image references to be shown with
    the recipe. All other keys are currently left unused.
    """

    key: str
    value: str


@dataclass(frozen=True)
class Recipe:
    """A complete recipe."""

    steps: List[Step] = field(default_factory=list)

    ingredients: List[Ingredient] = field(default_factory=list)
    """Each ingredient used in the recipe in order of first appearance."""

    cookware: List[Cookware] = field(default_factory=list)

    metadata: List[Metadata] = field(default_factory=list)
    """Metadata entries, in the order they were declared."""

    def get_metadata(self, key: str) -> List[str]:
        """Return the values of all metadata entries with the given key, in order."""
        return [entry.value for entry in self.metadata if entry.key == key]
