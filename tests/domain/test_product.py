"""Unit tests for the Product entity."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import MAX_PRICE, Product
from ims.domain.model.value_objects import Money


def _make_product(
    product_id: int = 1, name: str = "Pen", qty: int = 10, price: str = "5.00"
) -> Product:
    return Product(id=product_id, name=name, quantity_in_stock=qty, price=Money.of(price))


class TestProductCreation:

    def test_happy_path(self):
        p = _make_product()
        assert p.id == 1
        assert p.name == "Pen"
        assert p.quantity_in_stock == 10
        assert p.price == Money.of("5.00")

    def test_zero_quantity_and_price_allowed(self):
        p = _make_product(qty=0, price="0")
        assert p.total_value() == Money.zero()

    def test_create_coerces_price(self):
        p = Product.create(3, "Mug", 4, "50.00")
        assert p.price == Money.of("50.00")

    def test_create_accepts_decimal_and_money(self):
        assert Product.create(1, "A", 1, Decimal("2.5")).price == Money.of("2.5")
        assert Product.create(1, "A", 1, Money.of("2.5")).price == Money.of("2.5")


class TestProductValidation:

    @pytest.mark.parametrize("bad_id", [0, -1])
    def test_non_positive_id_rejected(self, bad_id):
        with pytest.raises(ValidationError, match="greater than zero") as exc_info:
            _make_product(product_id=bad_id)
        assert exc_info.value.field == "id"

    def test_bool_id_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _make_product(product_id=True)
        assert exc_info.value.field == "id"

    @pytest.mark.parametrize("bad_name", ["", "   ", "\t\n"])
    def test_blank_name_rejected(self, bad_name):
        with pytest.raises(ValidationError, match="cannot be empty") as exc_info:
            _make_product(name=bad_name)
        assert exc_info.value.field == "name"

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative") as exc_info:
            _make_product(qty=-1)
        assert exc_info.value.field == "quantity_in_stock"

    def test_non_integer_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Product(id=1, name="Pen", quantity_in_stock=1.5, price=Money.of("1"))

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid product price") as exc_info:
            Product.create(1, "Pen", 1, "-0.01")
        assert exc_info.value.field == "price"

    def test_unparseable_price_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Product.create(1, "Pen", 1, "abc")
        assert exc_info.value.field == "price"

    def test_raw_decimal_price_rejected_by_constructor(self):
        with pytest.raises(ValidationError, match="must be Money") as exc_info:
            Product(id=1, name="Pen", quantity_in_stock=1, price=Decimal("1"))
        assert exc_info.value.field == "price"

    def test_price_above_ceiling_rejected(self):
        with pytest.raises(ValidationError, match="cannot exceed") as exc_info:
            Product.create(1, "X", 10, "9E+999999")
        assert exc_info.value.field == "price"

    def test_price_just_above_ceiling_rejected_by_constructor(self):
        with pytest.raises(ValidationError, match="cannot exceed"):
            Product(id=1, name="X", quantity_in_stock=1, price=Money(MAX_PRICE + 1))

    def test_price_at_ceiling_has_a_total_value(self):
        p = Product.create(1, "X", 10**6, MAX_PRICE)
        assert p.total_value() == Money(MAX_PRICE * 10**6)


class TestProductBehaviour:

    def test_total_value_is_quantity_times_price(self):
        p = _make_product(qty=3, price="10.00")
        assert p.total_value() == Money.of("30.00")

    def test_set_quantity(self):
        p = _make_product(qty=3)
        p.set_quantity(0)
        assert p.quantity_in_stock == 0

    def test_set_negative_quantity_rejected_and_unchanged(self):
        p = _make_product(qty=3)
        with pytest.raises(ValidationError, match="cannot be negative"):
            p.set_quantity(-5)
        assert p.quantity_in_stock == 3

    def test_id_is_immutable(self):
        p = _make_product()
        with pytest.raises(AttributeError, match="cannot be changed"):
            p.id = 2
        assert p.id == 1

    def test_equality_is_by_id(self):
        assert _make_product(name="Pen") == _make_product(name="Pencil", qty=1)
        assert _make_product(product_id=1) != _make_product(product_id=2)
        assert len({_make_product(), _make_product()}) == 1

    def test_copy_is_detached(self):
        p = _make_product(qty=3)
        clone = p.copy()
        clone.set_quantity(99)
        assert p.quantity_in_stock == 3

    def test_str(self):
        assert str(_make_product()) == (
            "Product ID: 1, Name: Pen, Quantity in Stock: 10, Price: $5.00"
        )
