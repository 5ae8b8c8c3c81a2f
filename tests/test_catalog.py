SEAL = {
    "materialCode": "SP-NEW-001",
    "manufacturer": "Festo",
    "specification": "M12",
    "description": "Proximity sensor",
}


async def test_equipment_type_crud(client):
    resp = await client.post("/api/equipment-types", json={"typeName": "Robot Arm", "lifecycleYears": 8})
    assert resp.status_code == 201
    type_id = resp.json()["typeId"]

    resp = await client.put(f"/api/equipment-types/{type_id}", json={"typeName": "Robot Arm 6-axis"})
    assert resp.status_code == 200
    assert resp.json()["typeName"] == "Robot Arm 6-axis"
    # PUT replaces the row: omitted optional fields are cleared
    assert resp.json()["lifecycleYears"] is None

    resp = await client.get("/api/equipment-types")
    assert [t["typeName"] for t in resp.json()] == ["Robot Arm 6-axis"]


async def test_components_by_type(client, seeded):
    resp = await client.get("/api/components", params={"typeId": 2})
    assert resp.status_code == 200
    rows = resp.json()
    assert [c["componentName"] for c in rows] == ["Coolant Pump", "Spindle", "Tool Turret"]
    assert {c["typeName"] for c in rows} == {"CNC Lathe"}


async def test_component_validation(client, seeded):
    resp = await client.post(
        "/api/components",
        json={"typeId": 1, "componentName": "Valve", "importanceLevel": "D"},
    )
    assert resp.status_code == 400

    resp = await client.post(
        "/api/components",
        json={"typeId": 1, "componentName": "Valve", "importanceLevel": "B", "failureRate": 1.5},
    )
    assert resp.status_code == 201
    assert resp.json()["importanceLevel"] == "B"
    assert resp.json()["failureRate"] == 1.5


async def test_spare_part_create_defaults(client):
    resp = await client.post("/api/spare-parts", json=SEAL)
    assert resp.status_code == 201
    body = resp.json()
    assert body["isCustom"] is False
    assert body["manufacturerMaterialCode"] is None


async def test_duplicate_material_code_rejected(client):
    await client.post("/api/spare-parts", json=SEAL)
    resp = await client.post("/api/spare-parts", json={**SEAL, "manufacturer": "Other"})
    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Material code already exists"

    resp = await client.get("/api/spare-parts")
    assert len(resp.json()) == 1


async def test_update_spare_part_material_code(client, seeded):
    # Keeping its own code is allowed
    resp = await client.put(
        "/api/spare-parts/1",
        json={"materialCode": "SP-SEAL-100", "manufacturer": "Parker", "description": "Seal kit v2"},
    )
    assert resp.status_code == 200
    assert resp.json()["description"] == "Seal kit v2"

    # Taking another part's code is not
    resp = await client.put(
        "/api/spare-parts/1",
        json={"materialCode": "SP-PUMP-220", "manufacturer": "Parker"},
    )
    assert resp.status_code == 400


async def test_spare_part_search(client, seeded):
    resp = await client.get("/api/spare-parts")
    assert [p["materialCode"] for p in resp.json()] == [
        "SP-BELT-800",
        "SP-BRG-6205",
        "SP-MTR-4KW",
        "SP-PUMP-220",
        "SP-SEAL-100",
    ]

    resp = await client.get("/api/spare-parts", params={"search": "BEARING"})
    assert [p["materialCode"] for p in resp.json()] == ["SP-BRG-6205"]

    resp = await client.get("/api/spare-parts", params={"search": "skf"})
    assert [p["materialCode"] for p in resp.json()] == ["SP-BRG-6205"]

    resp = await client.get("/api/spare-parts", params={"isCustom": "true"})
    assert [p["materialCode"] for p in resp.json()] == ["SP-BELT-800"]


async def test_delete_referenced_spare_part_fails(client, seeded):
    resp = await client.delete("/api/spare-parts/1")
    assert resp.status_code == 500
    assert resp.json()["error"]["type"] == "database_error"


async def test_suppliers(client, seeded):
    resp = await client.get("/api/suppliers", params={"sparePartId": 3})
    rows = resp.json()
    assert [s["supplierName"] for s in rows] == ["Bearing House", "Industrial Supply Co"]
    assert {s["materialCode"] for s in rows} == {"SP-BRG-6205"}
    assert rows[0]["supplyCycleWeeks"] == 1

    resp = await client.post(
        "/api/suppliers", json={"sparePartId": 2, "supplierName": "Pump World", "supplyCycleWeeks": 3}
    )
    assert resp.status_code == 201
    supplier_id = resp.json()["supplierId"]

    resp = await client.get(f"/api/suppliers/{supplier_id}")
    assert resp.json()["supplierName"] == "Pump World"

    resp = await client.delete(f"/api/suppliers/{supplier_id}")
    assert resp.json() == {"success": True}


async def test_supplier_negative_cycle_rejected(client, seeded):
    resp = await client.post(
        "/api/suppliers", json={"sparePartId": 2, "supplierName": "Late Co", "supplyCycleWeeks": -1}
    )
    assert resp.status_code == 400
