import struct

import pytest

pytest.importorskip("cadquery")

from fastapi.testclient import TestClient

from moxon_frame import main
from moxon_frame.config import Settings


@pytest.fixture()
def client(tmp_path, monkeypatch) -> TestClient:
    monkeypatch.setattr(main, "settings", Settings(outputs_dir=tmp_path, cleanup_delay=0))
    return TestClient(main.app)


def test_health_endpoint(client) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": "1.0.0"}


def test_calculate_in_meters(client) -> None:
    response = client.post("/calculate", json={
        "frequency_mhz": 869.525,
        "wire_diameter": 1.38,
        "diameter_unit": "mm",
        "output_unit": "m",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["dimensions"]["unit"] == "m"
    assert 0.1 < body["dimensions"]["a"] < 0.2
    assert body["velocity_factor"] == 1.0
    assert body["warning"] is None


def test_calculate_rejects_zero_frequency(client) -> None:
    response = client.post("/calculate", json={"frequency_mhz": 0, "wire_diameter": 1.38})
    assert response.status_code == 422


def test_calculate_rejects_unknown_unit(client) -> None:
    response = client.post("/calculate", json={"frequency_mhz": 14.2, "wire_diameter": 1, "diameter_unit": "cubit"})
    assert response.status_code == 422


def test_generate_writes_downloadable_files(client, tmp_path) -> None:
    response = client.post("/generate", json={"frequency_mhz": 869.525, "wire_diameter": 1.38})
    assert response.status_code == 200
    body = response.json()

    assert body["triangle_count"] == 476
    assert body["stl_url"] == f"/outputs/{body['uuid']}/moxon-869.525mhz.stl"
    assert body["step_url"].endswith("/moxon-869.525mhz.step")
    assert (tmp_path / body["uuid"] / "moxon-869.525mhz.stl").is_file()

    stl = client.get(body["stl_url"])
    assert stl.status_code == 200
    assert stl.headers["content-type"] == "model/stl"
    assert len(stl.content) == 84 + 50 * 476
    assert struct.unpack_from("<I", stl.content, 80) == (476,)

    step = client.get(body["step_url"])
    assert step.status_code == 200
    assert b"ISO-10303-21" in step.content[:200]


def test_generate_without_hole_or_chamfer(client) -> None:
    response = client.post("/generate", json={
        "frequency_mhz": 869.525,
        "wire_diameter": 1.38,
        "mounting_hole_diameter": 0,
        "corner_chamfer": 0,
    })
    assert response.status_code == 200
    assert response.json()["triangle_count"] == 476 - 36 - 80


def test_generate_with_zero_length_tail(client) -> None:
    response = client.post("/generate", json={
        "frequency_mhz": 869.525,
        "wire_diameter": 1.38,
        "mounting_tail_length": 0,
    })
    assert response.status_code == 200
    assert response.json()["triangle_count"] == 476 - 4 * 12


def test_preview_boxes(client) -> None:
    response = client.post("/preview", json={"frequency_mhz": 869.525, "wire_diameter": 1.38})
    assert response.status_code == 200
    boxes = response.json()["boxes"]
    assert len(boxes) == 18
    assert boxes[0]["feature"] == "driver"
    assert boxes[-1]["feature"] == "boom"
    assert boxes[-1]["size"][2] == pytest.approx(35.0)


def test_missing_file_is_404(client) -> None:
    assert client.get("/outputs/nope/moxon-1mhz.stl").status_code == 404
    assert client.get("/outputs/../pyproject.toml").status_code == 404
