"""
Tests for the check-in room listing: tier dispatch, filters, pager window
"""
import pytest

from hotel_management.services.chamber_listing_service import (
    ChamberListingService, page_window, VIEW_NAME
)


@pytest.fixture
def listing(db_session):
    return ChamberListingService(db_session)


class TestTierDispatch:

    @pytest.fixture
    def tiered_rooms(self, make_chamber):
        return {
            "low": make_chamber(price_day=500_000),
            "edge_low": make_chamber(price_day=999_999),
            "mid": make_chamber(price_day=1_000_000),
            "edge_mid": make_chamber(price_day=2_999_999),
            "high": make_chamber(price_day=3_000_000),
        }

    def _ids(self, model):
        return {c.id for c in model["chambers"].content}

    def test_price_1_selects_low_tier(self, listing, tiered_rooms):
        model = {}
        listing.check_in_page(model, 0, 1)
        assert self._ids(model) == {tiered_rooms["low"].id, tiered_rooms["edge_low"].id}

    def test_price_2_selects_mid_tier(self, listing, tiered_rooms):
        model = {}
        listing.check_in_page(model, 0, 2)
        assert self._ids(model) == {tiered_rooms["mid"].id, tiered_rooms["edge_mid"].id}

    @pytest.mark.parametrize("price", [3, 0, 7, -1])
    def test_other_selectors_fall_back_to_high_tier(self, listing, tiered_rooms, price):
        model = {}
        listing.check_in_page(model, 0, price)
        assert self._ids(model) == {tiered_rooms["high"].id}
        assert model["check_price3"] is True


class TestFilters:

    def test_type_and_vip_filter(self, listing, make_chamber):
        match = make_chamber(chamber_type="single", is_vip=True)
        make_chamber(chamber_type="couple", is_vip=False)

        model = {}
        view = listing.check_in_page(model, 0, 1, "single", "true")

        assert view == VIEW_NAME
        assert model["total_element"] == 1
        assert [c.id for c in model["chambers"].content] == [match.id]

    def test_all_matches_every_type_and_vip(self, listing, make_chamber):
        make_chamber(chamber_type="single", is_vip=True)
        make_chamber(chamber_type="family", is_vip=False)

        model = {}
        listing.check_in_page(model, 0, 1, "all", "all")

        assert model["total_element"] == 2

    @pytest.mark.parametrize("vip", ["maybe", "TRUE", " All "])
    def test_unknown_vip_flag_matches_nothing(self, listing, make_chamber, vip):
        make_chamber(is_vip=True)
        make_chamber(is_vip=False)

        model = {}
        listing.check_in_page(model, 0, 1, "all", vip)

        assert model["total_element"] == 0
        assert model["check_vip1"] is False
        assert model["check_vip2"] is False
        assert model["filter_url"] == f"&p=1&t=all&v={vip}"

    def test_occupied_rooms_are_listed(self, listing, make_chamber):
        make_chamber(is_empty=False)

        model = {}
        listing.check_in_page(model, 0, 1)

        assert model["total_element"] == 1


class TestModelAttributes:

    def test_flags_and_urls(self, listing, make_chamber):
        make_chamber()

        model = {}
        listing.check_in_page(model, 0, 1, "single", "true")

        assert model["check_price1"] is True
        assert model["check_price2"] is False
        assert model["check_price3"] is False
        assert model["check_type1"] is True
        assert model["check_type2"] is False
        assert model["check_type3"] is False
        assert model["check_vip1"] is True
        assert model["check_vip2"] is False
        assert model["current_price"] == 1
        assert model["current_type"] == "single"
        assert model["current_vip"] == "true"
        assert model["base_url"] == "/check-in?page="
        assert model["filter_url"] == "&p=1&t=single&v=true"

    def test_second_type_and_vip_false(self, listing):
        model = {}
        listing.check_in_page(model, 0, 2, "couple", "false")

        assert model["check_type2"] is True
        assert model["check_vip2"] is True
        assert model["check_price2"] is True

    def test_single_page(self, listing, make_chamber):
        make_chamber()

        model = {}
        listing.check_in_page(model, 0, 1)

        assert model["begin_index"] == 1
        assert model["end_index"] == 1
        assert model["current_index"] == 1
        assert model["total_page_count"] == 1
        assert model["total_element"] == 1
        assert model["extra"] is False
        assert model["check_last"] is False

    def test_page_size_is_twelve(self, listing, make_chamber):
        for _ in range(40):
            make_chamber()

        model = {}
        listing.check_in_page(model, 0, 1)

        page = model["chambers"]
        assert page.size == 12
        assert len(page.content) == 12
        assert model["total_page_count"] == 4
        assert model["check_last"] is True
        assert model["extra"] is True

    def test_page_past_end_returns_no_rows(self, listing, make_chamber):
        for _ in range(3):
            make_chamber()

        model = {}
        listing.check_in_page(model, 5, 1)

        assert model["chambers"].content == []
        assert model["total_element"] == 3

    def test_idempotent(self, listing, make_chamber):
        for _ in range(5):
            make_chamber()

        first, second = {}, {}
        listing.check_in_page(first, 0, 1, "single", "all")
        listing.check_in_page(second, 0, 1, "single", "all")

        assert [c.id for c in first["chambers"].content] == [c.id for c in second["chambers"].content]
        first.pop("chambers")
        second.pop("chambers")
        assert first == second


class TestPageWindow:

    @pytest.mark.parametrize("page,total,expected", [
        (0, 0, (1, 1, 1)),
        (0, 1, (1, 1, 1)),
        (0, 10, (1, 1, 2)),
        (4, 10, (5, 4, 6)),
        (9, 10, (10, 9, 10)),
        (20, 3, (21, 3, 3)),
    ])
    def test_window(self, page, total, expected):
        assert page_window(page, total) == expected
