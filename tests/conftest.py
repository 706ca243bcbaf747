import random
from pathlib import Path

import pytest

from aixm_waypoints.document import AixmDocument
from aixm_waypoints.parsers.tree import parse_xml


def _make_slice(designator=None, pos=None):
    """Build a DesignatedPointTimeSlice dict the way xmltodict shapes it."""
    time_slice = {}
    if designator is not None:
        time_slice['aixm:designator'] = designator
    if pos is not None:
        time_slice['aixm:location'] = {'aixm:Point': {'gml:pos': pos}}
    return time_slice


def _make_point(gml_id, *slices):
    slice_value = slices[0] if len(slices) == 1 else list(slices)
    return {
        '@gml:id': gml_id,
        'aixm:timeSlice': {'aixm:DesignatedPointTimeSlice': slice_value},
    }


def _make_document(*members, **attributes):
    member_value = members[0] if len(members) == 1 else list(members)
    root = {f'@{k.replace("_", ":")}': v for k, v in attributes.items()}
    root['message:hasMember'] = member_value
    return {'message:AIXMBasicMessage': root}


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def test_cache_dir(tmp_path) -> Path:
    """Return a temporary directory for cache testing."""
    return tmp_path / 'cache'


@pytest.fixture
def sample_xml_path(test_assets_dir) -> Path:
    return test_assets_dir / 'donlon_sample.xml'


@pytest.fixture
def sample_xml(sample_xml_path) -> str:
    return sample_xml_path.read_text(encoding='utf-8')


@pytest.fixture
def sample_tree(sample_xml) -> dict:
    return parse_xml(sample_xml)


@pytest.fixture
def sample_document(sample_xml_path) -> AixmDocument:
    return AixmDocument.from_file(sample_xml_path)


@pytest.fixture
def single_waypoint_tree() -> dict:
    """One member, one point, one slice: TEST1 at 41.8 12.25."""
    return _make_document(
        {'aixm:DesignatedPoint': _make_point('uuid.TEST-1', _make_slice('TEST1', '41.8 12.25'))}
    )


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def make_slice():
    return _make_slice


@pytest.fixture
def make_point():
    return _make_point


@pytest.fixture
def make_document():
    return _make_document
