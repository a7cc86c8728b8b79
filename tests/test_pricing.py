"""Unit tests for ticket pricing and seat computation.

Run with: pytest tests/test_pricing.py -v
"""

import pytest

from tickets.domain import AggregatedCounts, PurchaseOutcome, TicketCategory
from tickets.domain.pricing import TICKET_PRICES, calculate_price, calculate_seats, price_purchase


class TestTicketPrices:
    """Tests for the price table."""

    def test_prices(self):
        """Adults cost 20, children 10, infants nothing."""
        assert TICKET_PRICES == {
            TicketCategory.ADULT: 20,
            TicketCategory.CHILD: 10,
            TicketCategory.INFANT: 0,
        }

    def test_prices_are_read_only(self):
        """The price table cannot be modified at runtime."""
        with pytest.raises(TypeError):
            TICKET_PRICES[TicketCategory.ADULT] = 1


class TestCalculations:
    """Tests for price and seat arithmetic."""

    @pytest.mark.parametrize("adult", [1, 4, 10, 20])
    @pytest.mark.parametrize("child", [0, 2, 7])
    def test_price_and_seats(self, adult, child):
        """Price is 20 per adult plus 10 per child; seats are adult + child."""
        assert calculate_price(adult, child) == 20 * adult + 10 * child
        assert calculate_seats(adult, child) == adult + child

    def test_infants_are_free_and_seatless(self):
        """Infants contribute nothing to price or seats."""
        with_infants = price_purchase(AggregatedCounts(adult=2, child=1, infant=2))
        without_infants = price_purchase(AggregatedCounts(adult=2, child=1))
        assert with_infants == without_infants == PurchaseOutcome(total_price=50, seats_to_reserve=3)
