import cv2
import numpy as np
import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework.test import APIClient

from dvs_app.adapters.storage.file_storage import MediaPhotoStorage
from dvs_app.application.use_cases.measure_photo import MeasurePatientPhotos, MeasurePhoto

from conftest import draw_reflexes


def png_upload(name='face.png', image=None):
    if image is None:
        image = draw_reflexes(np.zeros((200, 300, 3), dtype=np.uint8))
    ok, buf = cv2.imencode('.png', image)
    assert ok
    return SimpleUploadedFile(name, buf.tobytes(), content_type='image/png')


@pytest.fixture
def client():
    return APIClient()


@pytest.fixture
def use_cases(monkeypatch, make_locator, tmp_path):
    locator, _, _ = make_locator()
    measure = MeasurePhoto(locator, MediaPhotoStorage(media_root=str(tmp_path)))
    monkeypatch.setattr('dvs_app.views.get_measure_photo_use_case', lambda: measure)
    monkeypatch.setattr('dvs_app.views.get_measure_patient_use_case', lambda: MeasurePatientPhotos(measure))
    return measure


def test_api_root(client):
    resp = client.get('/api/')
    assert resp.status_code == 200
    assert resp.json()['endpoints']['measurement']['measure_photo'] == '/api/measure-photo/'


def test_api_test_endpoint(client):
    resp = client.get('/api/test/')
    assert resp.status_code == 200
    assert resp.json()['endpoints_available'] is True


def test_measure_photo(client, use_cases):
    resp = client.post('/api/measure-photo/', {'image': png_upload(), 'orientation': 'vertical'}, format='multipart')
    assert resp.status_code == 200
    m = resp.json()['measurement']
    assert m['orientation'] == 'vertical'
    assert m['eyes_found'] is True
    assert m['pupillary_distance'] == pytest.approx(140.0)
    assert m['left_eye']['white_dot']['distance'] == pytest.approx(5.5, abs=1.0)


def test_measure_photo_without_eyes_still_answers(client, monkeypatch, make_locator, tmp_path):
    locator, _, _ = make_locator(eye_boxes=[])
    measure = MeasurePhoto(locator, MediaPhotoStorage(media_root=str(tmp_path)))
    monkeypatch.setattr('dvs_app.views.get_measure_photo_use_case', lambda: measure)
    resp = client.post('/api/measure-photo/', {'image': png_upload()}, format='multipart')
    assert resp.status_code == 200
    m = resp.json()['measurement']
    assert m['eyes_found'] is False
    assert m['left_eye']['white_dot'] is None
    assert m['pupillary_distance'] is None


def test_measure_photo_requires_image(client, use_cases):
    resp = client.post('/api/measure-photo/', {}, format='multipart')
    assert resp.status_code == 400
    assert 'image' in resp.json()


def test_measure_photo_rejects_non_image(client, use_cases):
    bogus = SimpleUploadedFile('face.png', b'not an image', content_type='image/png')
    resp = client.post('/api/measure-photo/', {'image': bogus}, format='multipart')
    assert resp.status_code == 400


def test_measure_photo_rejects_unknown_orientation(client, use_cases):
    resp = client.post('/api/measure-photo/', {'image': png_upload(), 'orientation': 'diagonal'}, format='multipart')
    assert resp.status_code == 400
    assert 'orientation' in resp.json()


def test_measure_patient(client, use_cases):
    resp = client.post('/api/measure-patient/', {
        'horizontal_image': png_upload('h.png'),
        'vertical_image': png_upload('v.png'),
    }, format='multipart')
    assert resp.status_code == 200
    body = resp.json()
    assert body['horizontal']['orientation'] == 'horizontal'
    assert body['vertical']['orientation'] == 'vertical'
    assert body['vertical']['pupillary_distance'] == pytest.approx(140.0)


def test_measure_patient_needs_both_photos(client, use_cases):
    resp = client.post('/api/measure-patient/', {'horizontal_image': png_upload()}, format='multipart')
    assert resp.status_code == 400
    assert 'vertical_image' in resp.json()
