async def _query(client, **params):
    resp = await client.get("/api/associations", params=params)
    assert resp.status_code == 200, resp.text
    return resp.json()


async def test_list_all_associations(client, seeded):
    rows = await _query(client)
    assert len(rows) == 16
    first = rows[0]
    assert (first["equipmentName"], first["componentName"]) == ("Lathe L-01", "Coolant Pump")
    assert first["materialCode"] == "SP-BRG-6205"
    assert first["sparePartName"] == "Deep groove ball bearing"
    assert first["supplyCycleWeeks"] == 1


async def test_all_means_no_filter(client, seeded):
    rows = await _query(client, equipmentId="all", componentId="all", sparePartId="all")
    assert len(rows) == 16


async def test_filter_by_equipment(client, seeded):
    rows = await _query(client, equipmentId="1")
    assert len(rows) == 3
    assert {r["equipmentId"] for r in rows} == {1}
    seal = [r for r in rows if r["materialCode"] == "SP-SEAL-100"]
    assert {r["supplyCycleWeeks"] for r in seal} == {2}


async def test_filter_by_importance_levels(client, seeded):
    rows = await _query(client, importanceLevel="C")
    assert len(rows) == 4
    assert {r["importanceLevel"] for r in rows} == {"C"}

    rows = await _query(client, importanceLevel="A,C")
    assert {r["importanceLevel"] for r in rows} == {"A", "C"}


async def test_supply_cycle_range_does_not_duplicate(client, seeded):
    # Both bearing suppliers fall in the range; each association appears once
    rows = await _query(client, supplyCycleRange="1,2")
    assert len(rows) == 10
    assert len({r["id"] for r in rows}) == 10
    assert {r["materialCode"] for r in rows} == {"SP-BRG-6205", "SP-SEAL-100"}

    rows = await _query(client, supplyCycleRange="1,1")
    assert {r["materialCode"] for r in rows} == {"SP-BRG-6205"}


async def test_custom_and_keyword(client, seeded):
    rows = await _query(client, isCustom="true")
    assert len(rows) == 2
    assert {r["isCustom"] for r in rows} == {True}

    rows = await _query(client, keyword="lathe")
    assert len(rows) == 4

    rows = await _query(client, keyword="seal kit")
    assert {r["materialCode"] for r in rows} == {"SP-SEAL-100"}


async def test_filters_combine_with_and(client, seeded):
    rows = await _query(client, importanceLevel="A", keyword="pump")
    assert {r["componentName"] for r in rows} == {"Hydraulic Pump"}
    assert len(rows) == 4


async def test_no_match_returns_empty_list(client, seeded):
    assert await _query(client, keyword="does-not-exist") == []


async def test_malformed_query_parameters(client, seeded):
    for params in (
        {"equipmentId": "abc"},
        {"baseId": "x"},
        {"importanceLevel": "A,X"},
        {"supplyCycleRange": "5"},
        {"supplyCycleRange": "a,b"},
        {"supplyCycleRange": "9,2"},
    ):
        resp = await client.get("/api/associations", params=params)
        assert resp.status_code == 400, params


async def test_association_crud(client, seeded):
    resp = await client.post(
        "/api/associations", json={"equipmentId": 4, "componentId": 5, "sparePartId": 3}
    )
    assert resp.status_code == 201
    created = resp.json()
    assert created["quantity"] == 1

    resp = await client.put(
        f"/api/associations/{created['id']}",
        json={"equipmentId": 4, "componentId": 5, "sparePartId": 3, "quantity": 6},
    )
    assert resp.json()["quantity"] == 6

    resp = await client.delete(f"/api/associations/{created['id']}")
    assert resp.json() == {"success": True}
    resp = await client.get(f"/api/associations/{created['id']}")
    assert resp.status_code == 404


async def test_association_quantity_must_be_positive(client, seeded):
    resp = await client.post(
        "/api/associations",
        json={"equipmentId": 4, "componentId": 5, "sparePartId": 3, "quantity": 0},
    )
    assert resp.status_code == 400


async def test_supply_cycle_reported_within_range(client, seeded):
    # SP-BRG-6205 has suppliers at 1 and 2 weeks; only the 2-week one is in range
    rows = await _query(client, supplyCycleRange="2,6")
    assert rows
    assert all(2 <= r["supplyCycleWeeks"] <= 6 for r in rows)
    bearings = [r for r in rows if r["materialCode"] == "SP-BRG-6205"]
    assert {r["supplyCycleWeeks"] for r in bearings} == {2}
    assert "SP-PUMP-220" not in {r["materialCode"] for r in rows}


async def test_part_with_mixed_supplier_cycles(client, seeded):
    part = (
        await client.post("/api/spare-parts", json={"materialCode": "SP-MIX-1", "manufacturer": "Acme"})
    ).json()
    for name, weeks in (("Fast Co", 1), ("Slow Co", 4)):
        resp = await client.post(
            "/api/suppliers",
            json={"sparePartId": part["sparePartId"], "supplierName": name, "supplyCycleWeeks": weeks},
        )
        assert resp.status_code == 201
    resp = await client.post(
        "/api/associations",
        json={"equipmentId": 1, "componentId": 1, "sparePartId": part["sparePartId"]},
    )
    assert resp.status_code == 201

    rows = await _query(client, sparePartId=str(part["sparePartId"]), supplyCycleRange="2,6")
    assert [r["supplyCycleWeeks"] for r in rows] == [4]

    # Without a range the shortest cycle overall is reported
    rows = await _query(client, sparePartId=str(part["sparePartId"]))
    assert [r["supplyCycleWeeks"] for r in rows] == [1]

    assert await _query(client, sparePartId=str(part["sparePartId"]), supplyCycleRange="5,6") == []


async def test_filter_by_base_workshop_and_type(client, seeded):
    rows = await _query(client, baseId="2")
    assert len(rows) == 7
    assert {r["equipmentName"] for r in rows} == {"Lathe L-01", "Lathe L-02", "Outfeed Conveyor C-02"}

    rows = await _query(client, workshopId="3")
    assert {r["equipmentName"] for r in rows} == {"Lathe L-01", "Lathe L-02"}
    assert len(rows) == 4

    rows = await _query(client, typeId="3")
    assert len(rows) == 6
    assert {r["equipmentName"] for r in rows} == {"Line Conveyor C-01", "Outfeed Conveyor C-02"}

    rows = await _query(client, baseId="1", typeId="3")
    assert {r["equipmentName"] for r in rows} == {"Line Conveyor C-01"}

    assert len(await _query(client, baseId="all", workshopId="all", typeId="all")) == 16


async def test_base_without_equipment_has_no_associations(client, seeded):
    resp = await client.post("/api/bases", json={"baseName": "Other"})
    base_id = resp.json()["baseId"]
    assert await _query(client, baseId=str(base_id)) == []
