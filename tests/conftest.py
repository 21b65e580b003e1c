import pytest

from Mai.models import ActionRecord, NarrativeContext


def _action(time="09:00", duration_s=30, typed=False, **where):
    return ActionRecord(time=time, duration_s=duration_s, typed=typed, **where)


@pytest.fixture
def act():
    return _action


@pytest.fixture
def salesforce_context():
    """User sits in John Smith's Activities in Salesforce after a stint in Suzie Lee's account."""
    return NarrativeContext(
        currentApp="Chrome",
        browserCtx={"building": "Salesforce", "apartment": "John Smith", "room": "Activities"},
        recentActions=[
            _action("14:01", 120, True, building="Salesforce", apartment="Suzie Lee", room="Accounts"),
            _action("14:03", 3, building="Salesforce", apartment="John Smith", room="Pipeline"),
            _action("14:04", 40, True, building="Salesforce", apartment="John Smith", room="Activities"),
        ],
        timeOfDay={"hour": 14, "dayName": "Tuesday"},
    )


@pytest.fixture
def empty_context():
    return NarrativeContext(currentApp="Salesforce")
