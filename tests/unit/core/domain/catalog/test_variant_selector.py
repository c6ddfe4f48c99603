"""Unit tests — variant selector (pure)."""

from decimal import Decimal

import pytest

from storefront_client.core.domain.catalog import (
    Product,
    VariantStatus,
    check_completeness,
    option_label,
    select_variant,
)


class TestOptionLabel:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(9, "9"), (9.0, "9"), (9.5, "9.5"), (" 10 ", "10"), (None, ""), ("", "")],
    )
    def test_normalises_wire_values(self, raw: object, expected: str) -> None:
        assert option_label(raw) == expected


class TestSelectVariant:
    def test_valid_when_both_offered(self, product_a: Product) -> None:
        selection = select_variant(product_a, "10", "black")

        assert selection.status is VariantStatus.VALID
        assert selection.is_valid
        assert (selection.size, selection.color) == ("10", "black")

    def test_numeric_size_matches_string_option(self, product_a: Product) -> None:
        assert select_variant(product_a, 10, "black").is_valid

    @pytest.mark.parametrize(
        ("size", "color", "missing"),
        [
            ("", "black", ("size",)),
            ("10", "", ("color",)),
            ("  ", None, ("size", "color")),
        ],
    )
    def test_incomplete_lists_missing_options(
        self, product_a: Product, size: object, color: object, missing: tuple[str, ...]
    ) -> None:
        selection = select_variant(product_a, size, color)

        assert selection.status is VariantStatus.INCOMPLETE
        assert selection.missing == missing

    def test_invalid_when_not_offered(self, product_a: Product) -> None:
        selection = select_variant(product_a, "12", "black")

        assert selection.status is VariantStatus.INVALID
        assert selection.unavailable == ("size",)

    def test_incomplete_wins_over_invalid(self, product_a: Product) -> None:
        selection = select_variant(product_a, "12", "")

        assert selection.status is VariantStatus.INCOMPLETE


class TestCheckCompleteness:
    def test_does_not_need_a_product(self) -> None:
        assert check_completeness("9", "red").is_valid
        assert check_completeness("9", "").missing == ("color",)


class TestProduct:
    def test_rejects_negative_price(self) -> None:
        with pytest.raises(ValueError):
            Product(product_id="p", name="Bad", price=Decimal("-1"))

    def test_rejects_empty_id(self) -> None:
        with pytest.raises(ValueError):
            Product(product_id="", name="Nameless", price=Decimal("1"))
