"""Unit tests for ranking and next-page estimation."""
from datetime import datetime, timezone

import pytest

from event_finder_api.app.core.errors import MalformedInputError
from event_finder_api.app.services.event_fields import EventFields
from event_finder_api.app.services.event_ordering import composite_instant, next_page, rank_events


class TestCompositeInstant:
    """Test cases for composite_instant."""

    def test_local_values_are_tagged_utc(self):
        assert composite_instant("2024-07-04", "19:30") == datetime(
            2024, 7, 4, 19, 30, tzinfo=timezone.utc
        )

    def test_seconds_are_kept(self):
        assert composite_instant("2024-07-04", "19:30:15").second == 15

    def test_missing_parts(self):
        with pytest.raises(MalformedInputError):
            composite_instant(None, "19:30")

    def test_malformed_time(self):
        with pytest.raises(MalformedInputError):
            composite_instant("2024-07-04", "7pm")


class TestRankEvents:
    """Test cases for rank_events."""

    def test_ascending_by_date_then_time(self):
        late = EventFields(id="late", local_date="2024-07-05", local_time="10:00:00")
        evening = EventFields(id="evening", local_date="2024-07-04", local_time="19:30:00")
        morning = EventFields(id="morning", local_date="2024-07-04", local_time="09:00:00")

        ranked = rank_events([late, evening, morning])

        assert [event.id for event in ranked] == ["morning", "evening", "late"]

    def test_ties_keep_input_order(self):
        events = [
            EventFields(id=str(index), local_date="2024-07-04", local_time="20:00:00")
            for index in range(5)
        ]
        assert [event.id for event in rank_events(events)] == ["0", "1", "2", "3", "4"]


class TestNextPage:
    """Test cases for next_page."""

    def test_full_first_page(self):
        assert next_page(1, 200, page_size=200, max_page=4) == 2

    def test_short_page(self):
        assert next_page(1, 150, page_size=200, max_page=4) is None

    def test_ceiling(self):
        assert next_page(3, 200, page_size=200, max_page=4) == 4
        assert next_page(4, 200, page_size=200, max_page=4) is None
        assert next_page(4, 10, page_size=200, max_page=4) is None
