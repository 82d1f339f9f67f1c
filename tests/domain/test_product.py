"""Unit tests for the Product aggregate."""

import pytest

from gearstore.domain.exceptions import ValidationError
from gearstore.domain.model.product import Product, parse_inventory
from gearstore.domain.model.value_objects import Money


def _create(**overrides):
    values = dict(
        name="Venum Gloves",
        description="16oz, lightly used",
        price="75",
        inventory="1",
        category="Gloves",
        quality="Used - Good",
    )
    values.update(overrides)
    return Product.create(**values)


class TestProductCreation:

    def test_happy_path(self):
        product = _create(brand=" Venum ", color="")
        assert product.id == ""  # assigned by the record store
        assert product.price == Money.of("75")
        assert product.inventory == 1
        assert product.brand == "Venum"
        assert product.color is None

    def test_missing_required_fields(self):
        with pytest.raises(ValidationError, match="Missing required fields: name, category"):
            _create(name=" ", category="")

    def test_zero_inventory_is_not_missing(self):
        assert _create(inventory=0).inventory == 0

    def test_unknown_optional_field_rejected(self):
        with pytest.raises(ValidationError, match="Unknown product fields: material"):
            _create(material="leather")

    def test_at_most_four_images(self):
        with pytest.raises(ValidationError, match="at most 4 images"):
            _create(image_urls=[f"https://img/{n}.jpg" for n in range(5)])

    def test_blank_image_urls_dropped(self):
        product = _create(image_urls=["https://img/1.jpg", " ", ""])
        assert product.image_urls == ["https://img/1.jpg"]


class TestSold:

    def test_zero_inventory_is_sold(self):
        assert _create(inventory=0).is_sold

    def test_status_override_is_sold(self):
        product = _create()
        product.status = "Sold"
        assert product.is_sold

    def test_in_stock_is_not_sold(self):
        assert not _create().is_sold


class TestParseInventory:

    def test_parses_strings(self):
        assert parse_inventory(" 3 ") == 3

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative"):
            parse_inventory(-1)

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid inventory"):
            parse_inventory("lots")
