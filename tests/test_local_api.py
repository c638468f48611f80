def test_schematic_endpoint(client, example_text):
    r = client.post("/api/schematic", json={"board": example_text.splitlines()})
    assert r.status_code == 200
    body = r.json()
    assert body["part_sum"] == 4361
    assert body["gear_sum"] == 467835
    assert body["shape"] == [10, 10]
    assert "gears" not in body


def test_schematic_endpoint_with_gears(client, example_text):
    r = client.post(
        "/api/schematic",
        json={"board": example_text.splitlines(), "include_gears": True},
    )
    assert r.status_code == 200
    gears = r.json()["gears"]
    assert gears == [
        {"row": 1, "col": 3, "ratio": 16345},
        {"row": 8, "col": 5, "ratio": 451490},
    ]


def test_schematic_ragged_board(client):
    r = client.post("/api/schematic", json={"board": ["123", "45"]})
    assert r.status_code == 400
    assert "does not match" in r.json()["detail"]


def test_schematic_invalid_character(client):
    r = client.post("/api/schematic", json={"board": ["12a", "..."]})
    assert r.status_code == 400
    assert "Unexpected character" in r.json()["detail"]


def test_schematic_empty_board(client):
    r = client.post("/api/schematic", json={"board": []})
    assert r.status_code == 400


def test_calibration_endpoint(client, calibration_words):
    r = client.post("/api/calibration", json={"lines": calibration_words})
    assert r.status_code == 200
    assert r.json() == {"total": 281}

    r = client.post("/api/calibration", json={"lines": calibration_words, "spelled": False})
    assert r.json() == {"total": 209}


def test_cubes_endpoint(client, cube_games):
    r = client.post("/api/cubes", json={"lines": cube_games})
    assert r.status_code == 200
    assert r.json() == {"possible_id_sum": 8, "power_sum": 2286}


def test_cubes_malformed(client):
    r = client.post("/api/cubes", json={"lines": ["Game 1: 3 purple"]})
    assert r.status_code == 400
    assert "purple" in r.json()["detail"]
