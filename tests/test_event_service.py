"""Unit tests for the event list and detail pipelines."""
import asyncio

import pytest

from event_finder_api.app.core.errors import MalformedInputError, UpstreamError
from event_finder_api.app.services.event_service import raw_events_from_envelope


def envelope(*events):
    return {"_embedded": {"events": list(events)}, "page": {"totalElements": len(events)}}


class TestEnvelope:
    """Test cases for raw_events_from_envelope."""

    def test_reads_embedded_events(self):
        assert raw_events_from_envelope(envelope({"id": "a"})) == [{"id": "a"}]

    def test_zero_results(self):
        assert raw_events_from_envelope({"page": {"totalElements": 0}}) == []

    def test_page_past_the_last(self):
        assert raw_events_from_envelope({"page": {"totalElements": 400, "number": 3}}) == []

    @pytest.mark.parametrize(
        "body",
        [{"fault": "x"}, {"_embedded": {}}, {"_embedded": {"events": "x"}}],
    )
    def test_missing_envelope(self, body):
        with pytest.raises(UpstreamError):
            raw_events_from_envelope(body)


class TestListEvents:
    """Test cases for EventService.list_events."""

    def test_filters_ranks_and_formats(self, raw_event, upstream, make_service):
        late = raw_event(id="late", dates={"start": {
            "localDate": "2024-07-05", "localTime": "10:00:00", "dateTime": "2024-07-05T15:00:00Z"}})
        first = raw_event(id="first")
        tied = raw_event(id="tied")
        no_prices = raw_event(id="no-prices", priceRanges=None)
        no_state = raw_event(id="no-state")
        no_state["_embedded"]["venues"][0]["state"] = None
        service = make_service(upstream(envelope(late, first, no_prices, tied, no_state)))

        page = asyncio.run(service.list_events({"city": "Austin"}, page=1))

        assert [event.id for event in page.events] == ["first", "tied", "late"]
        assert page.next_page is None
        summary = page.events[0]
        assert summary.name == "Summer Jam"
        assert summary.date == "Thu, Jul 4"
        assert summary.time == "7:30 PM"
        assert summary.date_time_utc == "2024-07-05T00:30:00Z"
        assert summary.price_min == "25 USD"
        assert summary.price_max == "89.5 USD"
        assert summary.location == "Austin, TX"
        assert summary.venue == "Moody Center"

    def test_no_null_location_in_output(self, raw_event, upstream, make_service):
        no_city = raw_event(id="no-city")
        no_city["_embedded"]["venues"][0].pop("city")
        service = make_service(upstream(envelope(no_city, raw_event(id="ok"))))

        page = asyncio.run(service.list_events({}, page=1))

        assert [event.id for event in page.events] == ["ok"]
        assert all(event.location for event in page.events)

    def test_full_page_offers_next(self, raw_event, upstream, make_service):
        events = [raw_event(id=f"evt-{index}") for index in range(200)]
        service = make_service(upstream(envelope(*events)))

        page = asyncio.run(service.list_events({"page": "1"}, page=1))

        assert page.next_page == 2
        assert len(page.events) == 200

    def test_next_page_counts_raw_events(self, raw_event, upstream, make_service):
        events = [raw_event(id=f"evt-{index}", priceRanges=None) for index in range(200)]
        service = make_service(upstream(envelope(*events)))

        page = asyncio.run(service.list_events({}, page=2))

        assert page.events == []
        assert page.next_page == 3

    def test_short_page(self, raw_event, upstream, make_service):
        events = [raw_event(id=f"evt-{index}") for index in range(150)]
        service = make_service(upstream(envelope(*events)))

        assert asyncio.run(service.list_events({}, page=1)).next_page is None

    def test_last_offered_page(self, raw_event, upstream, make_service):
        events = [raw_event(id=f"evt-{index}") for index in range(200)]
        service = make_service(upstream(envelope(*events)))

        assert asyncio.run(service.list_events({}, page=4)).next_page is None

    def test_caller_page_size(self, raw_event, upstream, make_service):
        events = [raw_event(id=f"evt-{index}") for index in range(20)]
        recording = upstream(envelope(*events))
        service = make_service(recording)

        page = asyncio.run(service.list_events({"size": "20"}, page=1))

        assert recording.requests[0].url.params["size"] == "20"
        assert page.next_page == 2

    def test_repeated_page_size_uses_last_value(self, raw_event, upstream, make_service):
        events = [raw_event(id=f"evt-{index}") for index in range(20)]
        recording = upstream(envelope(*events))
        service = make_service(recording)

        page = asyncio.run(service.list_events({"size": ["50", "20"]}, page=1))

        assert recording.requests[0].url.params.get_list("size") == ["50", "20"]
        assert page.next_page == 2

    def test_upstream_failure(self, upstream, make_service):
        service = make_service(upstream({"fault": "down"}, status_code=503))

        with pytest.raises(UpstreamError):
            asyncio.run(service.list_events({}, page=1))

    def test_malformed_time_fails_request(self, raw_event, upstream, make_service):
        broken = raw_event(dates={"start": {
            "localDate": "2024-07-04", "localTime": "7pm", "dateTime": "2024-07-05T00:30:00Z"}})
        service = make_service(upstream(envelope(broken)))

        with pytest.raises(MalformedInputError):
            asyncio.run(service.list_events({}, page=1))


class TestGetEvent:
    """Test cases for EventService.get_event."""

    def test_full_detail(self, raw_event, upstream, make_service):
        service = make_service(upstream(raw_event()))

        detail = asyncio.run(service.get_event("evt-1", {}))

        assert detail.name == "Summer Jam"
        assert detail.date == "Thu, Jul 4"
        assert detail.time == "7:30 PM"
        assert detail.price_min == "$25.00"
        assert detail.price_max == "$89.50"
        assert detail.info == "Doors open at 6pm."
        assert detail.image == "https://img.test/summer_ARTIST_PAGE_3_2.jpg"
        assert detail.seatmap == "https://maps.test/seatmap.gif"
        assert detail.location == "Austin, TX"
        assert detail.venue == "Moody Center"
        assert detail.address == "2001 Robert Dedman Dr, 78712"
        assert detail.url == "https://tickets.test/evt-1"

    def test_sparse_event_has_nulls(self, upstream, make_service):
        service = make_service(upstream({"name": "Mystery Show", "id": "evt-9"}))

        detail = asyncio.run(service.get_event("evt-9", {}))

        assert detail.name == "Mystery Show"
        for field in ("date", "time", "price_min", "price_max", "info", "image",
                      "seatmap", "location", "venue", "address", "url"):
            assert getattr(detail, field) is None

    def test_free_event(self, raw_event, upstream, make_service):
        service = make_service(upstream(raw_event(priceRanges=[{"currency": "USD", "min": 0, "max": 0}])))

        detail = asyncio.run(service.get_event("evt-1", {}))

        assert detail.price_min == "$0.00"
        assert detail.price_max == "$0.00"
