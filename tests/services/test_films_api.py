# tests/services/test_films_api.py
from __future__ import annotations

from typing import Any, Dict


def _mk_film(api_client, title="Heat", release_date="1995-12-15", **extra) -> Dict[str, Any]:
    r = api_client.post("/api/films", json={"title": title, "release_date": release_date, **extra})
    assert r.status_code == 201, r.text
    return r.json()


def _mk_person(api_client, name="Michael Mann") -> Dict[str, Any]:
    r = api_client.post("/api/people", json={"name": name})
    assert r.status_code == 201, r.text
    return r.json()


def test_health(api_client):
    r = api_client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["ok"] is True


def test_film_crud_roundtrip(api_client):
    film = _mk_film(api_client, synopsis="Cops and robbers")
    fid = film["id"]

    r = api_client.get(f"/api/films/{fid}")
    assert r.status_code == 200 and r.json()["title"] == "Heat"

    r = api_client.patch(f"/api/films/{fid}", json={"title": "Heat (1995)"})
    assert r.status_code == 200
    assert r.json()["title"] == "Heat (1995)"
    assert r.json()["synopsis"] == "Cops and robbers"

    r = api_client.patch(f"/api/films/{fid}", json={"synopsis": None})
    assert r.json()["synopsis"] is None

    assert api_client.delete(f"/api/films/{fid}").status_code == 204
    assert api_client.delete(f"/api/films/{fid}").status_code == 204
    r = api_client.get(f"/api/films/{fid}")
    assert r.status_code == 404
    assert r.json()["kind"] == "film" and r.json()["ids"] == [fid]


def test_blank_title_is_rejected(api_client):
    r = api_client.post("/api/films", json={"title": "   ", "release_date": "2001-01-01"})
    assert r.status_code == 422


def test_search_ignores_unknown_sort_fields(api_client):
    _mk_film(api_client, "Fresh Air", "1990-01-01")
    _mk_film(api_client, "Mango Tango", "2005-01-01")
    _mk_film(api_client, "Banana Split", "2010-01-01")

    r = api_client.get(
        "/api/films",
        params=[("title", "MANGO split"), ("sort", "directors"), ("sort", "release_date,desc")],
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["total"] == 2
    assert [f["title"] for f in body["items"]] == ["Banana Split", "Mango Tango"]

    r = api_client.get("/api/films", params={"released_before": "2005-01-01", "sort": "synopsis"})
    assert [f["title"] for f in r.json()["items"]] == ["Fresh Air"]


def test_replace_directors(api_client):
    fid = _mk_film(api_client)["id"]
    a = _mk_person(api_client, "A")["id"]
    b = _mk_person(api_client, "B")["id"]
    c = _mk_person(api_client, "C")["id"]

    r = api_client.put(f"/api/films/{fid}/directors", json={"person_ids": [a, b]})
    assert r.status_code == 200, r.text
    r = api_client.put(f"/api/films/{fid}/directors", json={"person_ids": [b, c]})
    assert sorted(p["id"] for p in r.json()) == sorted([b, c])

    r = api_client.get(f"/api/people/{a}/films-directed")
    assert r.json() == []
    r = api_client.get(f"/api/people/{c}/films-directed")
    assert [f["id"] for f in r.json()] == [fid]


def test_replace_directors_unknown_people(api_client):
    fid = _mk_film(api_client)["id"]
    a = _mk_person(api_client, "A")["id"]
    api_client.put(f"/api/films/{fid}/directors/{a}")

    r = api_client.put(f"/api/films/{fid}/directors", json={"person_ids": [a, 991, 992]})
    assert r.status_code == 404
    assert r.json()["kind"] == "person"
    assert r.json()["ids"] == [991, 992]

    r = api_client.get(f"/api/films/{fid}/directors")
    assert [p["id"] for p in r.json()] == [a]


def test_single_director_endpoints(api_client):
    fid = _mk_film(api_client)["id"]
    a = _mk_person(api_client, "A")["id"]

    assert api_client.put(f"/api/films/{fid}/directors/{a}").status_code == 204
    assert api_client.put(f"/api/films/{fid}/directors/{a}").status_code == 204
    assert [p["id"] for p in api_client.get(f"/api/films/{fid}/directors").json()] == [a]

    assert api_client.delete(f"/api/films/{fid}/directors/{a}").status_code == 204
    assert api_client.get(f"/api/films/{fid}/directors").json() == []

    assert api_client.put(f"/api/films/{fid}/directors/424242").status_code == 404
    assert api_client.delete(f"/api/films/424242/directors").status_code == 404


def test_replace_cast(api_client):
    fid = _mk_film(api_client)["id"]
    a = _mk_person(api_client, "Al Pacino")["id"]
    b = _mk_person(api_client, "Robert De Niro")["id"]

    r = api_client.put(f"/api/films/{fid}/cast", json={"cast": [
        {"person_id": a, "character": "Vincent Hanna"},
        {"person_id": b, "character": "Neil McCauley"},
    ]})
    assert r.status_code == 200, r.text
    assert [(m["person_id"], m["character"]) for m in r.json()] == [(a, "Vincent Hanna"), (b, "Neil McCauley")]

    r = api_client.put(f"/api/films/{fid}/cast", json={"cast": [{"person_id": b, "character": "Neil"}]})
    assert [(m["person_id"], m["character"]) for m in r.json()] == [(b, "Neil")]
    assert api_client.get(f"/api/people/{a}/roles").json() == []

    r = api_client.put(f"/api/films/{fid}/cast", json={"cast": [{"person_id": b, "character": " "}]})
    assert r.status_code == 422

    r = api_client.put(f"/api/films/{fid}/cast", json={"cast": [{"person_id": 515151, "character": "X"}]})
    assert r.status_code == 404 and r.json()["ids"] == [515151]
    assert [m["character"] for m in api_client.get(f"/api/films/{fid}/cast").json()] == ["Neil"]

    assert api_client.put(f"/api/films/{fid}/cast", json={"cast": None}).json() == []
    assert api_client.delete(f"/api/films/{fid}/cast").status_code == 204
