import pytest
from pydantic import ValidationError
from feltreport.schemas import Event, Found, NotFound, ScreenState, outcome_from

class TestEventValidation:
    """Unit tests for the Event model"""

    def test_valid_event(self):
        """Test valid event creation"""
        event = Event(title="M 5.0 - 10km ENE of X", num_of_people=120, perceived_strength="Strong")
        assert event.title == "M 5.0 - 10km ENE of X"
        assert event.num_of_people == 120
        assert event.perceived_strength == "Strong"

    def test_numeric_cdi_kept_as_text(self):
        """Test CDI numbers from the feed become text"""
        event = Event(title="M 5.0", num_of_people=1, perceived_strength=4.7)
        assert event.perceived_strength == "4.7"

        event = Event(title="M 5.0", num_of_people=1, perceived_strength=5)
        assert event.perceived_strength == "5"

    def test_negative_people_rejected(self):
        """Test that the count cannot go below zero"""
        with pytest.raises(ValidationError):
            Event(title="M 5.0", num_of_people=-1, perceived_strength="4.0")

    def test_missing_fields_rejected(self):
        """Test that all three fields are required"""
        with pytest.raises(ValidationError):
            Event(title="M 5.0", num_of_people=10)
        with pytest.raises(ValidationError):
            Event(title="M 5.0", num_of_people=None, perceived_strength="4.0")

    def test_event_is_immutable(self):
        """Test that events cannot be changed after creation"""
        event = Event(title="M 5.0", num_of_people=10, perceived_strength="4.0")
        with pytest.raises(ValidationError):
            event.title = "other"

class TestFetchOutcome:
    """Unit tests for the Found / NotFound outcome"""

    def test_outcome_from_event(self):
        event = Event(title="M 5.0", num_of_people=10, perceived_strength="4.0")
        outcome = outcome_from(event)
        assert isinstance(outcome, Found)
        assert outcome.kind == "found"
        assert outcome.event == event

    def test_outcome_from_none(self):
        outcome = outcome_from(None)
        assert isinstance(outcome, NotFound)
        assert outcome.kind == "not_found"

class TestScreenState:

    def test_defaults_are_blank(self):
        state = ScreenState(state="fetching")
        assert state.title == ""
        assert state.number_of_people == ""
        assert state.perceived_strength == ""
        assert state.notices == []

    def test_unknown_state_rejected(self):
        with pytest.raises(ValidationError):
            ScreenState(state="loading")
