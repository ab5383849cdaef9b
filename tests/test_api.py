from fastapi.testclient import TestClient

import country_mapper.main as api


def test_health_and_lookups():
    with TestClient(api.app) as client:
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"
        assert r.json()["countries"] > 200

        r = client.get("/countries/name/south korea")
        assert r.status_code == 200
        body = r.json()
        assert body["alpha3"] == "KOR"
        assert body["currencies"] == ["KRW"]
        assert body["calling_codes"] == ["82"]

        r = client.get("/countries/alpha2/SG")
        assert r.status_code == 200
        assert r.json()["name"] == "Singapore"

        r = client.get("/countries/alpha3/sgp")
        assert r.status_code == 200
        assert r.json()["name"] == "Singapore"

        r = client.get("/countries/currency/SGD")
        assert r.status_code == 200
        assert r.json()[0]["name"] == "Singapore"

        r = client.get("/countries/calling-code/65")
        assert r.status_code == 200
        assert r.json()[0]["name"] == "Singapore"

        r = client.get("/countries/region/Oceania")
        assert r.status_code == 200
        assert all(c["region"] == "Oceania" for c in r.json())

        r = client.get("/countries/subregion/South-Eastern Asia")
        assert r.status_code == 200
        assert "Vietnam" in [c["name"] for c in r.json()]


def test_not_found_and_empty_results():
    with TestClient(api.app) as client:
        r = client.get("/countries/name/southkorea")
        assert r.status_code == 404
        assert r.json()["detail"] == "Country not found"

        r = client.get("/countries/alpha2/ZZ")
        assert r.status_code == 404

        r = client.get("/countries/currency/XXX")
        assert r.status_code == 200
        assert r.json() == []


def test_list_countries_and_root():
    with TestClient(api.app) as client:
        r = client.get("/countries")
        assert r.status_code == 200
        assert len(r.json()) == len(api.app.state.client)
        assert "_name_lower" not in r.json()[0]

        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["name"] == "country-mapper API"
