import pytest

from aixm_waypoints.exceptions import SourceError
from aixm_waypoints.sources.file import FileSource


def test_load(sample_xml_path):
    source = FileSource(sample_xml_path)
    document = source.load()
    assert source.get_source_name() == 'donlon_sample.xml'
    assert len(document.waypoints()) == 3


def test_missing_file(tmp_path):
    with pytest.raises(SourceError, match='does not exist'):
        FileSource(tmp_path / 'nope.xml').load()
