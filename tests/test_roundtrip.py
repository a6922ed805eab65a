"""Round trip between serialize() and the loader."""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import event, given, settings

from proplexengine import (
    Properties,
    PropertiesLoader,
    PropertiesParser,
    PropertiesStatus,
    load_properties,
    load_properties_buffer,
    serialize_properties,
    store_properties,
)

from .strategies import chaos_source, simple_mappings, simple_mappings_with_none


def _build(mapping: dict[str, str | None]) -> Properties:
    props = Properties()
    for key, value in mapping.items():
        props.put(key, value)
    return props


class TestBufferRoundTrip:
    """serialize -> load_properties_buffer."""

    @given(mapping=simple_mappings)
    def test_simple_values(self, mapping: dict[str, str]) -> None:
        """PROPERTY: simple keys and values survive a round trip."""
        event(f"size={min(len(mapping), 5)}")
        reloaded = load_properties_buffer(serialize_properties(_build(mapping)))
        assert reloaded.is_ok
        assert dict(reloaded.items()) == mapping

    @given(mapping=simple_mappings_with_none)
    def test_no_value_sentinel(self, mapping: dict[str, str | None]) -> None:
        """PROPERTY: None values reload as present keys without value."""
        reloaded = load_properties_buffer(serialize_properties(_build(mapping)))
        assert dict(reloaded.items()) == mapping
        for key, value in mapping.items():
            if value is None:
                event("has_none")
                assert reloaded.has_key(key)
                assert reloaded.get(key) is None

    @given(mapping=simple_mappings)
    def test_serialize_is_stable(self, mapping: dict[str, str]) -> None:
        """PROPERTY: serializing a reloaded store reproduces the text."""
        text = serialize_properties(_build(mapping))
        assert serialize_properties(load_properties_buffer(text)) == text


class TestLossyValues:
    """Values the default parser rewrites on reload."""

    def test_empty_string_reloads_as_no_value(self) -> None:
        """'' is written as 'k=', which loads as the no-value sentinel."""
        reloaded = load_properties_buffer(serialize_properties(_build({"k": ""})))
        assert reloaded.has_key("k")
        assert reloaded.get("k") is None

    def test_quoted_value_loses_quotes(self) -> None:
        """A value wrapped in double quotes reloads without them."""
        reloaded = load_properties_buffer(serialize_properties(_build({"k": '"v"'})))
        assert reloaded.get("k") == "v"

    def test_both_survive_with_post_processing_off(self) -> None:
        """Disabling quote stripping and empty-as-none makes both lossless."""
        loader = PropertiesLoader(
            parser=PropertiesParser(strip_quotes=False, empty_value_as_none=False)
        )
        mapping: dict[str, str | None] = {"empty": "", "quoted": '"v"'}
        reloaded = loader.load_buffer(serialize_properties(_build(mapping)))
        assert dict(reloaded.items()) == mapping


class TestFileRoundTrip:
    """store_properties -> load_properties."""

    @settings(max_examples=20)
    @given(mapping=simple_mappings_with_none)
    def test_through_disk(
        self, tmp_path_factory: pytest.TempPathFactory, mapping: dict[str, str | None]
    ) -> None:
        """PROPERTY: a stored store loads back equal."""
        target: Path = tmp_path_factory.mktemp("roundtrip") / "out.properties"
        assert store_properties(_build(mapping), target) is PropertiesStatus.OK
        assert dict(load_properties(target).items()) == mapping


@pytest.mark.fuzz
class TestChaosLoad:
    """Arbitrary input never breaks the loader."""

    @settings(max_examples=2000)
    @given(source=chaos_source())
    def test_load_never_raises(self, source: str) -> None:
        """PROPERTY: any text loads to an OK store with non-empty keys."""
        props = load_properties_buffer(source)
        assert props.status is PropertiesStatus.OK
        assert all(key for key in props.keys())
        assert all("\n" not in key for key in props.keys())
