"""HTTP tests for /api/v1/episodes."""


class TestListEpisodesApi:
    async def test_title_filter(self, client, small_world):
        resp = await client.get("/api/v1/episodes", params={"title": "the avatar returns"})
        assert resp.status_code == 200
        body = resp.json()
        assert [e["id"] for e in body["data"]] == [small_world["avatar"].id]
        assert body["metadata"]["total_records"] == 1

    async def test_air_date_filter_with_tie_break(self, client, small_world):
        body = (
            await client.get(
                "/api/v1/episodes", params={"air_date": "2005-02-21", "sort": "-air_date"}
            )
        ).json()
        # Same air date on both: ties fall back to ascending id
        assert [e["id"] for e in body["data"]] == [
            small_world["boy"].id, small_world["avatar"].id,
        ]

    async def test_air_date_filter_ignores_case(self, client):
        resp = await client.post(
            "/api/v1/episodes", json={"title": "Winter Solstice", "air_date": "Winter 2005"}
        )
        assert resp.status_code == 201

        body = (await client.get("/api/v1/episodes", params={"air_date": "winter 2005"})).json()
        assert [e["id"] for e in body["data"]] == [resp.json()["data"]["id"]]
        assert body["metadata"]["total_records"] == 1

    async def test_sort_by_title_both_ways(self, client, small_world):
        asc = (await client.get("/api/v1/episodes", params={"sort": "title"})).json()["data"]
        desc = (await client.get("/api/v1/episodes", params={"sort": "-title"})).json()["data"]
        assert [e["title"] for e in asc] == ["The Avatar Returns", "The Boy in the Iceberg"]
        assert [e["id"] for e in desc] == [e["id"] for e in reversed(asc)]

    async def test_sort_outside_safelist(self, client):
        resp = await client.get("/api/v1/episodes", params={"sort": "-age"})
        assert resp.status_code == 422
        assert resp.json()["error"]["fields"] == {"sort": "invalid sort value"}


class TestEpisodeCrudApi:
    async def test_create_and_update(self, client):
        resp = await client.post(
            "/api/v1/episodes", json={"title": "The Southern Air Temple", "air_date": "2005-02-25"}
        )
        assert resp.status_code == 201
        episode = resp.json()["data"]
        assert episode["airDate"] == "2005-02-25"

        resp = await client.put(f"/api/v1/episodes/{episode['id']}", json={"airDate": "2005-03-04"})
        assert resp.status_code == 200
        assert resp.json()["data"]["airDate"] == "2005-03-04"
        assert resp.json()["data"]["title"] == "The Southern Air Temple"

    async def test_create_requires_title(self, client):
        resp = await client.post("/api/v1/episodes", json={"air_date": "2005-02-25"})
        assert resp.status_code == 422
        assert "title" in resp.json()["error"]["fields"]

    async def test_delete_cascades_links(self, client, small_world):
        episode_id = small_world["boy"].id
        assert (await client.delete(f"/api/v1/episodes/{episode_id}")).status_code == 204
        resp = await client.get(f"/api/v1/characters/{small_world['katara'].id}/episodes")
        assert resp.json()["data"]["episodes"] == []


class TestEpisodeCastApi:
    async def test_episode_characters(self, client, small_world):
        resp = await client.get(f"/api/v1/episodes/{small_world['boy'].id}/characters")
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["episode"]["title"] == "The Boy in the Iceberg"
        assert [c["name"] for c in data["characters"]] == ["Aang", "Katara"]

    async def test_add_character_twice(self, client, small_world):
        url = f"/api/v1/episodes/{small_world['boy'].id}/characters/{small_world['zuko'].id}"
        first = await client.put(url)
        second = await client.put(url)
        assert first.status_code == second.status_code == 200
        names = [c["name"] for c in second.json()["data"]["characters"]]
        assert names == ["Aang", "Katara", "Zuko"]

    async def test_add_missing_character(self, client, small_world):
        resp = await client.put(f"/api/v1/episodes/{small_world['boy'].id}/characters/999")
        assert resp.status_code == 404
