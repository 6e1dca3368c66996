from __future__ import annotations

import json

from placementexamen.__main__ import main


def test_exemple_prints_rooms(capsys):
    assert main(["exemple"]) == 0
    out = capsys.readouterr().out
    assert "=== A101" in out
    assert "=== B204" in out
    assert "(vérification : OK)" in out


def test_exemple_json(capsys):
    assert main(["exemple", "--json", "--places-par-banc", "3"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert set(data["rooms"]) == {"A101", "B204"}
    assert data["total_seats"] == 36
