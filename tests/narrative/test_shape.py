from Mai.narrative.shape import enforce_shape


def test_missing_fields_get_defaults():
    result = enforce_shape({})
    assert result.H == "No history available."
    assert result.P == "Present unknown."
    assert result.F == ["Keep going", "Keep going"]


def test_scalar_forecast_is_wrapped():
    result = enforce_shape({"H": "h", "P": "p", "F": "Open Pipeline"})
    assert result.F == ["Open Pipeline", "Keep going"]


def test_long_forecast_is_truncated():
    result = enforce_shape({"H": "h", "P": "p", "F": ["a", "b", "c", "d"]})
    assert result.F == ["a", "b", "c"]


def test_valid_output_is_kept():
    raw = {"H": "Before this, you were in HubSpot.", "P": "You're in Salesforce.", "F": ["Next: Accounts", "Then: Pipeline"]}
    result = enforce_shape(raw)
    assert result.model_dump() == raw
