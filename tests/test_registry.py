import pytest

from sradapters.adapters.base import MeasurementAdapter
from sradapters.adapters.elliptical_roi import EllipticalROI
from sradapters.adapters.registry import AdapterRegistry, build_default_registry
from sradapters.adapters.tracking import build_tracking_identifier, split_tracking_identifier
from sradapters.config import SOURCE_TAG, TRACKING_IDENTIFIER


@pytest.mark.parametrize("value, expected", [
    ("Cornerstone3DTools@^0.1.0:EllipticalROI", True),
    ("Cornerstone3DTools@^0.1.0:Length", False),
    ("src-tag:EllipticalROI", False),
    ("EllipticalROI", False),
    ("Cornerstone3DTools@^0.1.0:EllipticalROI:extra", False),
    ("", False),
])
def test_is_valid_tracking_identifier(value, expected):
    assert EllipticalROI.is_valid_tracking_identifier(value) is expected


def test_tracking_identifier_layout():
    assert TRACKING_IDENTIFIER == "Cornerstone3DTools@^0.1.0:EllipticalROI"
    assert EllipticalROI.tracking_identifier() == TRACKING_IDENTIFIER
    assert build_tracking_identifier("Length") == f"{SOURCE_TAG}:Length"
    assert split_tracking_identifier(TRACKING_IDENTIFIER) == (SOURCE_TAG, "EllipticalROI")
    assert split_tracking_identifier("no-separator") is None


def test_default_registry_dispatch():
    registry = build_default_registry()

    assert registry.tool_types() == ["EllipticalROI"]
    assert registry.get("EllipticalROI") is EllipticalROI
    assert registry.find_by_tracking_identifier(TRACKING_IDENTIFIER) is EllipticalROI
    assert registry.find_by_tracking_identifier("OtherTool@^1.0:EllipticalROI") is None


def test_unknown_tool_type():
    with pytest.raises(KeyError):
        build_default_registry().get("Bidirectional")


def test_registries_are_independent():
    first = build_default_registry()
    second = AdapterRegistry()

    assert "EllipticalROI" in first
    assert "EllipticalROI" not in second
    assert second.find_by_tracking_identifier(TRACKING_IDENTIFIER) is None


def test_register_rejects_duplicates_and_untyped_adapters():
    registry = build_default_registry()

    with pytest.raises(ValueError):
        registry.register(EllipticalROI)

    class Untyped(MeasurementAdapter):
        pass

    with pytest.raises(ValueError):
        registry.register(Untyped)


def test_base_adapter_is_abstract():
    with pytest.raises(NotImplementedError):
        MeasurementAdapter.get_tid300_representation_arguments(None, None)
