async def test_base_crud(client):
    resp = await client.post("/api/bases", json={"baseName": "East Plant"})
    assert resp.status_code == 201
    created = resp.json()
    base_id = created["baseId"]
    assert created["baseName"] == "East Plant"
    assert created["createdAt"]

    resp = await client.get(f"/api/bases/{base_id}")
    assert resp.status_code == 200
    assert resp.json()["baseName"] == "East Plant"

    resp = await client.put(f"/api/bases/{base_id}", json={"baseName": "East Plant 2"})
    assert resp.status_code == 200
    assert resp.json()["baseName"] == "East Plant 2"

    resp = await client.delete(f"/api/bases/{base_id}")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    resp = await client.get(f"/api/bases/{base_id}")
    assert resp.status_code == 404


async def test_update_and_delete_missing_base(client):
    resp = await client.put("/api/bases/42", json={"baseName": "Nowhere"})
    assert resp.status_code == 404
    resp = await client.delete("/api/bases/42")
    assert resp.status_code == 404


async def test_list_bases_ordered_by_name(client, seeded):
    resp = await client.get("/api/bases")
    assert resp.status_code == 200
    assert [b["baseName"] for b in resp.json()] == ["North Plant", "South Plant"]


async def test_delete_base_with_workshops_is_database_error(client, seeded):
    resp = await client.delete("/api/bases/1")
    assert resp.status_code == 500
    body = resp.json()
    assert body["error"]["type"] == "database_error"
    assert "FOREIGN KEY" in body["error"]["message"]

    # The failed delete left the base untouched.
    resp = await client.get("/api/bases/1")
    assert resp.status_code == 200


async def test_workshop_busy_level_accepts_number(client, seeded):
    resp = await client.post(
        "/api/workshops", json={"baseId": 1, "workshopName": "Paint Shop", "busyLevel": 4}
    )
    assert resp.status_code == 201
    assert resp.json()["busyLevel"] == "4"


async def test_workshop_invalid_busy_level(client, seeded):
    resp = await client.post(
        "/api/workshops", json={"baseId": 1, "workshopName": "Paint Shop", "busyLevel": "7"}
    )
    assert resp.status_code == 400


async def test_workshop_unknown_base_is_rejected(client):
    resp = await client.post(
        "/api/workshops", json={"baseId": 99, "workshopName": "Orphan", "busyLevel": "1"}
    )
    assert resp.status_code == 500
    assert resp.json()["error"]["type"] == "database_error"


async def test_list_workshops_by_base(client, seeded):
    resp = await client.get("/api/workshops", params={"baseId": 1})
    assert resp.status_code == 200
    rows = resp.json()
    assert [w["workshopName"] for w in rows] == ["Assembly", "Stamping"]
    assert {w["baseId"] for w in rows} == {1}

    resp = await client.get("/api/workshops")
    assert len(resp.json()) == 4


async def test_equipment_pagination(client, seeded):
    resp = await client.get("/api/equipment", params={"page": 2, "limit": 4})
    assert resp.status_code == 200
    body = resp.json()
    assert body["pagination"] == {"page": 2, "limit": 4, "total": 6, "totalPages": 2}
    assert [e["equipmentId"] for e in body["data"]] == [5, 6]


async def test_equipment_pages_do_not_overlap(client, seeded):
    seen = []
    for page in (1, 2, 3):
        resp = await client.get(
            "/api/equipment", params={"page": page, "limit": 2, "sortBy": "typeName"}
        )
        seen.extend(e["equipmentId"] for e in resp.json()["data"])
    assert sorted(seen) == [1, 2, 3, 4, 5, 6]


async def test_equipment_sorting_and_joined_names(client, seeded):
    resp = await client.get(
        "/api/equipment", params={"sortBy": "equipmentName", "sortOrder": "desc"}
    )
    first = resp.json()["data"][0]
    assert first["equipmentName"] == "Press P-02"
    assert first["workshopName"] == "Stamping"
    assert first["typeName"] == "Hydraulic Press"
    assert first["baseName"] == "North Plant"
    assert first["baseId"] == 1


async def test_equipment_filters(client, seeded):
    resp = await client.get("/api/equipment", params={"baseId": 2})
    body = resp.json()
    assert body["pagination"]["total"] == 3
    assert {e["baseName"] for e in body["data"]} == {"South Plant"}

    resp = await client.get("/api/equipment", params={"search": "press"})
    assert resp.json()["pagination"]["total"] == 2

    resp = await client.get("/api/equipment", params={"typeId": 3, "workshopId": 4})
    assert [e["equipmentName"] for e in resp.json()["data"]] == ["Outfeed Conveyor C-02"]


async def test_equipment_empty_page(client, seeded):
    resp = await client.get("/api/equipment", params={"page": 10})
    body = resp.json()
    assert body["data"] == []
    assert body["pagination"]["total"] == 6


async def test_equipment_unknown_sort_field_is_400(client):
    resp = await client.get("/api/equipment", params={"sortBy": "bogus"})
    assert resp.status_code == 400


async def test_equipment_crud(client, seeded):
    resp = await client.post(
        "/api/equipment", json={"workshopId": 2, "typeId": 3, "equipmentName": "Conveyor C-09"}
    )
    assert resp.status_code == 201
    equipment_id = resp.json()["equipmentId"]

    resp = await client.put(
        f"/api/equipment/{equipment_id}",
        json={"workshopId": 3, "typeId": 3, "equipmentName": "Conveyor C-09"},
    )
    assert resp.status_code == 200
    assert resp.json()["workshopId"] == 3

    resp = await client.delete(f"/api/equipment/{equipment_id}")
    assert resp.json() == {"success": True}
