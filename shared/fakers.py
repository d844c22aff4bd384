"""
Randomized domain records for UI scenarios.

Records are built once at suite import time and never mutated: the
dataclasses are frozen, and derived values (image file names) are computed
from the stored fields.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from faker import Faker

# Initialize Faker for generating test data
fake = Faker()


def unique_suffix() -> str:
    """Short random suffix that keeps generated names distinct within a run."""
    return uuid.uuid4().hex[:6]


@dataclass(frozen=True)
class CategoryData:
    """A category as typed into the back office form."""

    name: str
    displayed: bool = True
    description: str = ""
    meta_title: str = ""
    meta_description: str = ""

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Category name must not be empty")

    @property
    def image_name(self) -> str:
        """File name of the cover/thumbnail image uploaded with the category."""
        return f"{self.name}.jpg"


class CategoryFaker:
    """
    Factory for ``CategoryData`` records.

    Unset fields are filled with random but valid values. Overrides are used
    verbatim, so callers passing a fixed ``name`` own its uniqueness.

    Example:
        create_category = CategoryFaker()()
        edit_category = CategoryFaker()(displayed=False, name=f"update{create_category.name}")
    """

    def __init__(self, faker: Faker | None = None):
        self.faker = faker or fake

    def __call__(self, **overrides) -> CategoryData:
        defaults = {
            "name": f"{self.faker.word()} {self.faker.word()} {unique_suffix()}",
            "displayed": True,
            "description": self.faker.sentence(),
            "meta_title": self.faker.word(),
            "meta_description": self.faker.sentence(),
        }
        defaults.update(overrides)
        return CategoryData(**defaults)

    def random_displayed(self) -> bool:
        """Random value for the ``displayed`` flag."""
        return self.faker.boolean()
