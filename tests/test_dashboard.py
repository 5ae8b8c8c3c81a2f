async def test_stats_empty(client):
    resp = await client.get("/api/dashboard/stats")
    assert resp.status_code == 200
    assert set(resp.json().values()) == {0}


async def test_stats(client, seeded):
    resp = await client.get("/api/dashboard/stats")
    assert resp.json() == {
        "totalBases": 2,
        "totalWorkshops": 4,
        "totalEquipment": 6,
        "totalComponents": 8,
        "totalSpareParts": 5,
        "totalSuppliers": 7,
    }


async def test_charts(client, seeded):
    resp = await client.get("/api/dashboard/charts")
    assert resp.status_code == 200
    body = resp.json()
    assert body["equipmentByType"] == [
        {"name": "Belt Conveyor", "value": 2},
        {"name": "CNC Lathe", "value": 2},
        {"name": "Hydraulic Press", "value": 2},
    ]
    assert body["equipmentByBase"] == [
        {"name": "North Plant", "value": 3},
        {"name": "South Plant", "value": 3},
    ]
    assert body["componentsByImportance"] == [
        {"name": "A - core", "value": 3},
        {"name": "B - normal", "value": 3},
        {"name": "C - unimportant", "value": 2},
    ]


async def test_importance_series_always_has_three_levels(client):
    resp = await client.get("/api/dashboard/charts")
    body = resp.json()
    assert [p["value"] for p in body["componentsByImportance"]] == [0, 0, 0]
    assert body["equipmentByType"] == []
