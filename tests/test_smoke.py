# comments in English
def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.content == b"ok"


def test_sante(client):
    r = client.get("/placementexamen/sante")
    assert r.status_code == 200
    assert r.json()["service"] == "placementexamen"
