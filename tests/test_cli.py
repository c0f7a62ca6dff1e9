import json

import pytest

import measure_photo


def test_cli_prints_measurement(make_locator, face_photo_path, capsys):
    locator, _, _ = make_locator()
    assert measure_photo.main([face_photo_path], locator=locator) == 0
    doc = json.loads(capsys.readouterr().out)
    assert doc['orientation'] == 'horizontal'
    assert doc['pupillary_distance'] == pytest.approx(140.0)


def test_cli_patient_pair(make_locator, face_photo_path, capsys):
    locator, _, _ = make_locator()
    assert measure_photo.main([face_photo_path, '--vertical', face_photo_path], locator=locator) == 0
    doc = json.loads(capsys.readouterr().out)
    assert set(doc) == {'horizontal', 'vertical'}


def test_cli_missing_photo(make_locator, tmp_path, capsys):
    locator, _, _ = make_locator()
    assert measure_photo.main([str(tmp_path / 'nope.jpg')], locator=locator) == 2
    assert 'ERROR' in capsys.readouterr().err
