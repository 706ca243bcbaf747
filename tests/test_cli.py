import pytest

from aixm_waypoints.cli import build_parser, main
from aixm_waypoints.config import AxisOrder
from aixm_waypoints.utils.geodesic import DistanceUnit


def test_list(sample_xml_path, capsys):
    assert main(['list', str(sample_xml_path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == ['ABLAN', 'BOKSU', 'N/A']
    assert "52°18'0.0000\" N" in lines[0]


def test_list_sorted_and_searched(sample_xml_path, capsys):
    assert main(['list', str(sample_xml_path), '--sort', '--search', 'b']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == ['ABLAN', 'BOKSU']


def test_csv_to_stdout(sample_xml_path, capsys):
    assert main(['csv', str(sample_xml_path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == 'Designator,Lat,Lon,Lat DMS,Lon DMS'
    assert out[1].startswith('ABLAN,52.3,-8.9,')
    assert len(out) == 4


def test_csv_to_file(sample_xml_path, tmp_path):
    output = tmp_path / 'out.csv'
    assert main(['csv', str(sample_xml_path), '-o', str(output)]) == 0
    assert output.read_text(encoding='utf-8').startswith('Designator,')


def test_export(sample_xml_path, tmp_path, capsys):
    output = tmp_path / 'only.xml'
    assert main(['export', str(sample_xml_path), '-o', str(output)]) == 0
    assert capsys.readouterr().out.strip() == str(output)
    assert 'aixm:Navaid' not in output.read_text(encoding='utf-8')


def test_distance(tmp_path, capsys):
    xml = tmp_path / 'pair.xml'
    xml.write_text(
        '<message:AIXMBasicMessage>'
        '<message:hasMember><aixm:DesignatedPoint><aixm:timeSlice><aixm:DesignatedPointTimeSlice>'
        '<aixm:designator>AAA</aixm:designator>'
        '<aixm:location><aixm:Point><gml:pos>0 0</gml:pos></aixm:Point></aixm:location>'
        '</aixm:DesignatedPointTimeSlice></aixm:timeSlice></aixm:DesignatedPoint></message:hasMember>'
        '<message:hasMember><aixm:DesignatedPoint><aixm:timeSlice><aixm:DesignatedPointTimeSlice>'
        '<aixm:designator>BBB</aixm:designator>'
        '<aixm:location><aixm:Point><gml:pos>0 1</gml:pos></aixm:Point></aixm:location>'
        '</aixm:DesignatedPointTimeSlice></aixm:timeSlice></aixm:DesignatedPoint></message:hasMember>'
        '</message:AIXMBasicMessage>',
        encoding='utf-8'
    )
    assert main(['distance', str(xml), 'aaa', 'BBB', '--unit', 'nm']) == 0
    assert capsys.readouterr().out.strip() == 'AAA -> BBB: 60.04 NM'

    assert main(['distance', str(xml), 'AAA', 'BBB']) == 0
    assert capsys.readouterr().out.strip() == 'AAA -> BBB: 111.19 Km'


def test_distance_unknown_designator(sample_xml_path):
    assert main(['distance', str(sample_xml_path), 'ABLAN', 'ZZZZZ']) == 1


def test_missing_file_fails(tmp_path):
    assert main(['list', str(tmp_path / 'missing.xml')]) == 1


def test_not_xml_fails(tmp_path):
    path = tmp_path / 'bad.xml'
    path.write_text('not xml at all', encoding='utf-8')
    assert main(['list', str(path)]) == 1


def test_no_waypoints_fails(tmp_path):
    path = tmp_path / 'empty.xml'
    path.write_text('<message:AIXMBasicMessage/>', encoding='utf-8')
    assert main(['list', str(path)]) == 1
    assert main(['export', str(path), '-o', str(tmp_path / 'out.xml')]) == 1


def test_parser_defaults_and_types():
    args = build_parser().parse_args(['distance', 'f.xml', 'A', 'B', '--unit', 'FT', '--axis-order', 'lon_lat'])
    assert args.unit is DistanceUnit.FEET
    assert args.axis_order is AxisOrder.LON_LAT
    assert args.cache_dir == 'cache'


def test_invalid_unit_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(['distance', 'f.xml', 'A', 'B', '--unit', 'miles'])


def test_list_from_url(sample_xml, tmp_path, capsys, monkeypatch):
    from aixm_waypoints.sources import web

    class Response:
        content = sample_xml.encode('utf-8')

        def raise_for_status(self):
            pass

    monkeypatch.setattr(web.requests, 'get', lambda url, timeout=None: Response())
    args = ['list', 'https://example.org/donlon.xml', '--url', '-c', str(tmp_path / 'cache')]
    assert main(args) == 0
    assert len(capsys.readouterr().out.splitlines()) == 3
    assert list((tmp_path / 'cache' / 'websource').glob('document_*.xml'))


def test_distance_same_waypoint_fails(sample_xml_path, capsys):
    assert main(['distance', str(sample_xml_path), 'ABLAN', 'ablan']) == 1
    assert capsys.readouterr().out == ''


def test_never_refresh_reuses_expired_cache(sample_xml, tmp_path, capsys, monkeypatch):
    from aixm_waypoints.sources import web

    calls = []

    class Response:
        content = sample_xml.encode('utf-8')

        def raise_for_status(self):
            pass

    def fake_get(url, timeout=None):
        calls.append(url)
        return Response()

    monkeypatch.setattr(web.requests, 'get', fake_get)
    args = ['list', 'https://example.org/donlon.xml', '--url', '-c', str(tmp_path / 'cache')]
    assert main(args) == 0
    assert main(args + ['--max-age-days', '-1']) == 0
    assert len(calls) == 2
    assert main(args + ['--max-age-days', '-1', '--never-refresh']) == 0
    assert len(calls) == 2
