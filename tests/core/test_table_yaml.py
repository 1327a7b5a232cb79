"""
Tests for building tables from YAML.
"""

from io import StringIO

import pytest
import yaml

from cattable import CatTable, PrefixMarker, TableConfig, TableFactory
from cattable.yaml import Loader, load

DOCUMENT = """
name: web
_defaults:
  port: 8080
  _tls:
    cert: server.pem
"""


@pytest.mark.unit
class TestYamlLoad:
    """Test cattable.yaml.load()."""

    def test_load_string(self):
        """Test loading a YAML string."""
        table = load(DOCUMENT)
        assert isinstance(table, CatTable)
        assert table["name"] == "web"
        assert table["port"] == 8080
        assert table["cert"] == "server.pem"

    def test_load_stream(self):
        """Test loading from an open stream."""
        assert load(StringIO(DOCUMENT))["port"] == 8080

    def test_non_mapping_document(self):
        """Test a document that is not a mapping yields an empty table."""
        assert len(load("- a\n- b\n")) == 0
        assert len(load("")) == 0

    def test_marker_option(self):
        """Test the marker option applies to the root table."""
        table = load("+a:\n  x: 1\n_b:\n  y: 2\n", marker="+")
        assert table.marker == PrefixMarker("+")
        assert table["x"] == 1
        assert table["_b"] == {"y": 2}

    def test_should_cache_option(self):
        """Test the cache option applies to the root table."""
        assert load(DOCUMENT, should_cache=False).cache is None

    def test_factory_option(self):
        """Test tables are created by the given factory."""
        factory = TableFactory(TableConfig(default_marker="+"))
        table = load("+a:\n  x: 1\n", factory=factory)
        assert table._factory is factory
        assert table["x"] == 1

    def test_numeric_and_date_keys_become_strings(self):
        """Test numeric and date keys are converted to strings."""
        table = load("1: one\n2024-01-02: date\n")
        assert table["1"] == "one"
        assert table["2024-01-02"] == "date"

    def test_bool_keys_are_kept(self):
        """Test boolean keys are not converted."""
        assert load("true: flag\n")[True] == "flag"

    def test_converted_key_collision_last_wins(self):
        """Test a numeric key and a later equal string key keep the later value."""
        assert load("1: a\n'1': b\n").to_dict() == {"1": "b"}
        assert load("'1': a\n1: b\n").to_dict() == {"1": "b"}

    def test_key_order_preserved(self):
        """Test converted keys keep their document position."""
        assert list(load("b: 1\n2: 2\na: 3\n").keys()) == ["b", "2", "a"]

    def test_converted_keys_in_categories(self):
        """Test key conversion applies inside nested mappings."""
        table = load("_a:\n  10: ten\n")
        assert table["10"] == "ten"

    def test_invalid_yaml_raises(self):
        """Test malformed documents raise yaml.YAMLError."""
        with pytest.raises(yaml.YAMLError):
            load("a: [1, 2\n")

    def test_loader_is_safe(self):
        """Test arbitrary Python objects are rejected."""
        with pytest.raises(yaml.YAMLError):
            yaml.load("!!python/object/apply:os.system ['true']", Loader=Loader)
