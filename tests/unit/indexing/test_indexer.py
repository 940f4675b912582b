"""Unit tests for name derivation and duplicate detection."""

from __future__ import annotations

import logging
import warnings
from types import SimpleNamespace

import pytest

from cirrus.rm.core import ConfigurationError, DuplicateNameWarning, FieldLookupError
from cirrus.rm.indexing import NamedCollection, NameIndexer, named_list
from cirrus.rm.models import Resource


class TestNameIndexerBuild:
    """Test NameIndexer.build behavior."""

    def test_single_field(self):
        """Single field: the name is the field value."""
        result = NameIndexer(["name"]).build([{"name": "a"}])

        assert result.names == ("a",)
        assert list(result) == [{"name": "a"}]

    def test_multiple_fields_joined_in_requested_order(self):
        """Several fields are joined with '/' in the order requested."""
        item = {"name": "a", "loc": "eastus"}

        assert NameIndexer(["name", "loc"]).build([item]).names == ("a/eastus",)
        assert NameIndexer(["loc", "name"]).build([item]).names == ("eastus/a",)

    def test_order_preserved(self):
        """Names follow the order of the input items."""
        items = [{"name": n} for n in ["zeta", "alpha", "mid", "beta"]]

        result = NameIndexer().build(items)

        assert len(result) == len(items)
        assert result.names == ("zeta", "alpha", "mid", "beta")
        assert list(result) == items

    @pytest.mark.parametrize("items", [[], None, ()])
    def test_empty_input_returns_empty_collection(self, items):
        """Empty or missing input gives an empty collection, not None."""
        result = NameIndexer().build(items)

        assert isinstance(result, NamedCollection)
        assert len(result) == 0
        assert result.names == ()
        assert list(result) == []

    def test_non_string_values_are_stringified(self):
        """Field values are converted to strings."""
        result = NameIndexer(["name", "zone"]).build([{"name": "disk", "zone": 2}])

        assert result.names == ("disk/2",)

    def test_idempotent(self):
        """Repeated builds over the same input give identical results."""
        indexer = NameIndexer(["name", "location"])
        items = [
            {"name": "vm1", "location": "eastus"},
            {"name": "vm2", "location": "westus"},
        ]

        first = indexer.build(items)
        second = indexer.build(items)

        assert first == second
        assert first.names == ("vm1/eastus", "vm2/westus")

    def test_mixed_item_shapes(self):
        """Mappings, models and plain objects can be indexed together."""
        items = [
            {"name": "raw"},
            Resource(name="model", location="eastus"),
            SimpleNamespace(name="plain"),
        ]

        assert NameIndexer().build(items).names == ("raw", "model", "plain")

    def test_resource_extra_field(self):
        """Fields outside the declared model are usable as name fields."""
        resource = Resource(name="st1", kind="StorageV2")

        assert NameIndexer(["name", "kind"]).build([resource]).names == ("st1/StorageV2",)


class TestNameIndexerDuplicates:
    """Test duplicate name detection."""

    def test_case_insensitive_duplicates_warn_once(self):
        """Names differing only in case trigger one warning; both items are kept."""
        items = [{"name": "A"}, {"name": "a"}]

        with pytest.warns(DuplicateNameWarning) as record:
            result = NameIndexer().build(items)

        assert len(record) == 1
        assert "a" in str(record[0].message)
        assert len(result) == 2
        assert result.names == ("A", "a")

    def test_each_duplicated_name_listed_once(self):
        """A name duplicated several times is reported once."""
        items = [{"name": n} for n in ["x", "x", "x", "y", "Y", "z"]]

        with pytest.warns(DuplicateNameWarning) as record:
            NameIndexer().build(items)

        assert len(record) == 1
        assert str(record[0].message) == "Some names are duplicated: x Y"

    def test_no_warning_without_duplicates(self):
        """Distinct names do not warn."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            NameIndexer().build([{"name": "a"}, {"name": "b"}])

    def test_multi_field_names_distinguish_items(self):
        """Items sharing one field are distinct when another field differs."""
        items = [
            {"name": "vm1", "location": "eastus"},
            {"name": "vm1", "location": "westus"},
        ]

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = NameIndexer(["name", "location"]).build(items)

        assert result.names == ("vm1/eastus", "vm1/westus")

    def test_duplicates_logged(self, caplog):
        """Duplicates are also logged as a warning record."""
        with caplog.at_level(logging.WARNING, logger="cirrus.rm.indexing"):
            with pytest.warns(DuplicateNameWarning):
                NameIndexer().build([{"name": "a"}, {"name": "a"}])

        assert any(r.getMessage() == "duplicate_names_detected" for r in caplog.records)

    def test_lookup_is_last_wins(self):
        """Name lookup on a duplicated name resolves to the last item."""
        first = {"name": "a", "id": 1}
        second = {"name": "A", "id": 2}
        third = {"name": "a", "id": 3}

        with pytest.warns(DuplicateNameWarning):
            result = NameIndexer().build([first, second, third])

        assert result.get("a") is third
        assert result.get("A") is second
        assert result.to_dict() == {"a": third, "A": second}


class TestNameIndexerErrors:
    """Test fatal error conditions."""

    def test_missing_field_on_mapping(self):
        """A field missing from a mapping item raises FieldLookupError."""
        with pytest.raises(FieldLookupError) as exc_info:
            NameIndexer(["name", "location"]).build(
                [{"name": "a", "location": "eastus"}, {"name": "b"}]
            )

        assert exc_info.value.field == "location"
        assert exc_info.value.index == 1
        assert isinstance(exc_info.value, LookupError)

    def test_missing_field_on_model(self):
        """A field missing from a model item raises FieldLookupError."""
        with pytest.raises(FieldLookupError):
            NameIndexer(["sku"]).build([Resource(name="a")])

    def test_none_value_is_missing(self):
        """A field present with value None counts as missing."""
        with pytest.raises(FieldLookupError):
            NameIndexer().build([Resource(location="eastus")])

    @pytest.mark.parametrize("fields", [[], (), 42, None, ["name", 3], [""]])
    def test_invalid_fields(self, fields):
        """Malformed field lists are configuration errors."""
        with pytest.raises(ConfigurationError):
            NameIndexer(fields)

    def test_string_field_accepted(self):
        """A bare string is a single field name."""
        assert NameIndexer("name").fields == ("name",)


class TestNamedList:
    """Test the named_list convenience function."""

    def test_default_field(self):
        result = named_list([{"name": "rg1"}, {"name": "rg2"}])

        assert result.names == ("rg1", "rg2")

    def test_name_fields(self):
        result = named_list([{"name": "a", "loc": "eastus"}], ["name", "loc"])

        assert result.names == ("a/eastus",)

    def test_empty(self):
        result = named_list()

        assert len(result) == 0
        assert result.names == ()
