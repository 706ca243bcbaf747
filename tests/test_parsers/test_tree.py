import pytest

from aixm_waypoints.exceptions import DocumentParseError
from aixm_waypoints.parsers.tree import as_list, get_path, parse_xml, resolve_text, unparse_xml


def test_as_list():
    assert as_list(None) == []
    assert as_list({'a': 1}) == [{'a': 1}]
    assert as_list('text') == ['text']
    items = [1, 2]
    assert as_list(items) is items


def test_resolve_text():
    assert resolve_text('41.8 12.25') == '41.8 12.25'
    assert resolve_text({'@srsName': 'EPSG:4326', '#text': '41.8 12.25'}) == '41.8 12.25'
    assert resolve_text({'__text': 'x'}, text_key='__text') == 'x'
    assert resolve_text({'@xsi:nil': 'true'}) is None
    assert resolve_text(None) is None
    assert resolve_text(['a', 'b']) is None


def test_get_path():
    tree = {'a': {'b': {'c': 'leaf'}}}
    assert get_path(tree, 'a', 'b', 'c') == 'leaf'
    assert get_path(tree, 'a', 'x', 'c') is None
    assert get_path(tree, 'a', 'b', 'c', 'd') is None
    assert get_path(None, 'a') is None
    assert get_path(tree) is tree


def test_parse_xml_shapes():
    tree = parse_xml(
        '<root xmlns:gml="http://www.opengis.net/gml/3.2">'
        '<item gml:id="one"/><item gml:id="two"/>'
        '<single><gml:pos srsName="x">1 2</gml:pos></single>'
        '</root>'
    )
    root = tree['root']
    assert isinstance(root['item'], list)
    assert root['item'][1]['@gml:id'] == 'two'
    assert resolve_text(root['single']['gml:pos']) == '1 2'


def test_parse_xml_rejects_non_xml():
    with pytest.raises(DocumentParseError):
        parse_xml('this is not xml')
    with pytest.raises(DocumentParseError):
        parse_xml('')


def test_unparse_round_trip_keeps_content():
    tree = {'message:AIXMBasicMessage': {'@gml:id': 'root', 'message:hasMember': [{'a': '1'}, {'a': '2'}]}}
    text = unparse_xml(tree)
    assert text.startswith('<?xml')
    assert parse_xml(text) == tree
