import json

import pytest
import yaml

from nestconf import ConfSyntaxError, ConfValueError
from nestconf.format import Dumper, SLoader, raises


class TestSLoader:

    def test_names(self):
        assert SLoader.__names__ == ['json', 'toml', 'yaml']

    def test_lookup(self):
        assert SLoader.lookup('toml', ConfValueError) is SLoader.toml
        assert SLoader.lookup(SLoader.yaml, ConfValueError) is SLoader.yaml
        assert not hasattr(SLoader.json, 'lookup')

    def test_lookup_unknown(self):
        with pytest.raises(ConfValueError) as excinfo:
            SLoader.lookup('ini', ConfValueError, 'format')

        assert str(excinfo.value) == "unsupported format 'ini' (expected one of: json, toml, yaml)"

    def test_json(self):
        assert SLoader.json('{"a": [1, 2]}') == {'a': [1, 2]}
        assert json.JSONDecodeError in SLoader.json.raises

    def test_toml_bytes(self):
        assert SLoader.toml(b'a = "A"\n') == {'a': 'A'}

    def test_yaml_empty(self):
        assert SLoader.yaml('') == {}
        assert yaml.YAMLError in SLoader.yaml.raises


class TestDumper:

    def test_names(self):
        assert Dumper.__names__ == ['json', 'toml', 'yaml']

    def test_json(self):
        assert Dumper.json({'a': 1}) == '{"a": 1}'

    def test_raises(self):
        assert TypeError in Dumper.json.raises


class TestTag:

    def test_repr(self):
        assert repr(raises) == "tag('raises', Undefined)"
        assert repr(raises(KeyError)) == "tag('raises', <class 'KeyError'>)"

    def test_set(self):
        def func():
            pass

        assert raises(KeyError)(func) is func
        assert func.raises is KeyError


class TestConfSyntaxError:

    def test_unknown(self):
        error = ConfSyntaxError('json', None)
        assert error.category is ConfSyntaxError.Category.unknown
        assert str(error) == 'JSON parse error: Unknown error'

    def test_depth(self):
        error = ConfSyntaxError('toml', RecursionError('too deep'))
        assert error.category is ConfSyntaxError.Category.depth
        assert str(error) == 'TOML parse error: Maximum stack depth exceeded: too deep'

    def test_syntax(self):
        error = ConfSyntaxError('yaml', yaml.YAMLError('bad'))
        assert str(error) == 'YAML parse error: Syntax error, malformed YAML: bad'
