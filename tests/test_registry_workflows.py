async def _create(client, path, payload):
    resp = await client.post(path, json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_created_chain_appears_in_base_hierarchy(client):
    base = await _create(client, "/api/bases", {"baseName": "Base A"})
    workshop = await _create(
        client, "/api/workshops", {"baseId": base["baseId"], "workshopName": "W1", "busyLevel": "2"}
    )
    eq_type = await _create(client, "/api/equipment-types", {"typeName": "Press"})
    equipment = await _create(
        client,
        "/api/equipment",
        {"workshopId": workshop["workshopId"], "typeId": eq_type["typeId"], "equipmentName": "E1"},
    )

    tree = (await client.get(f"/api/hierarchy/base/{base['baseId']}")).json()
    assert tree["name"] == "Base A"
    assert [w["id"] for w in tree["children"]] == [workshop["workshopId"]]
    leaf = tree["children"][0]["children"][0]
    assert (leaf["id"], leaf["name"], leaf["type"]) == (equipment["equipmentId"], "E1", "equipment")


async def test_delete_base_succeeds_after_workshops_removed(client):
    base = await _create(client, "/api/bases", {"baseName": "Base B"})
    workshop = await _create(
        client, "/api/workshops", {"baseId": base["baseId"], "workshopName": "W1", "busyLevel": "1"}
    )

    resp = await client.delete(f"/api/bases/{base['baseId']}")
    assert resp.status_code == 500

    resp = await client.delete(f"/api/workshops/{workshop['workshopId']}")
    assert resp.json() == {"success": True}
    resp = await client.delete(f"/api/bases/{base['baseId']}")
    assert resp.json() == {"success": True}


async def test_second_page_of_equipment(client):
    base = await _create(client, "/api/bases", {"baseName": "Base C"})
    workshop = await _create(
        client, "/api/workshops", {"baseId": base["baseId"], "workshopName": "W1", "busyLevel": "1"}
    )
    eq_type = await _create(client, "/api/equipment-types", {"typeName": "Lathe"})
    for i in range(25):
        await _create(
            client,
            "/api/equipment",
            {"workshopId": workshop["workshopId"], "typeId": eq_type["typeId"], "equipmentName": f"E{i:02d}"},
        )

    resp = await client.get(
        "/api/equipment", params={"page": 2, "limit": 10, "sortBy": "equipmentName"}
    )
    body = resp.json()
    assert [e["equipmentName"] for e in body["data"]] == [f"E{i:02d}" for i in range(10, 20)]
    assert body["pagination"]["total"] == 25
    assert body["pagination"]["totalPages"] == 3


async def test_equipment_tree_two_components_two_parts(client):
    base = await _create(client, "/api/bases", {"baseName": "Base D"})
    workshop = await _create(
        client, "/api/workshops", {"baseId": base["baseId"], "workshopName": "W1", "busyLevel": "3"}
    )
    eq_type = await _create(client, "/api/equipment-types", {"typeName": "Mill"})
    equipment = await _create(
        client,
        "/api/equipment",
        {"workshopId": workshop["workshopId"], "typeId": eq_type["typeId"], "equipmentName": "Mill 1"},
    )
    components = [
        await _create(
            client,
            "/api/components",
            {"typeId": eq_type["typeId"], "componentName": name, "importanceLevel": level},
        )
        for name, level in (("Head", "A"), ("Table", "B"))
    ]
    parts = [
        await _create(client, "/api/spare-parts", {"materialCode": code, "manufacturer": "Acme"})
        for code in ("P-1", "P-2")
    ]
    for ci, component in enumerate(components):
        for pi, part in enumerate(parts):
            await _create(
                client,
                "/api/associations",
                {
                    "equipmentId": equipment["equipmentId"],
                    "componentId": component["componentId"],
                    "sparePartId": part["sparePartId"],
                    "quantity": ci * 10 + pi + 1,
                },
            )

    tree = (await client.get(f"/api/hierarchy/equipment/{equipment['equipmentId']}")).json()
    assert [c["name"] for c in tree["children"]] == ["Head", "Table"]
    for ci, (node, level) in enumerate(zip(tree["children"], ("A", "B"))):
        assert len(node["children"]) == 2
        assert [p["data"]["importanceLevel"] for p in node["children"]] == [level, level]
        assert [p["data"]["quantity"] for p in node["children"]] == [ci * 10 + 1, ci * 10 + 2]
        # No description, so the material code names the node
        assert [p["name"] for p in node["children"]] == ["P-1", "P-2"]
        assert node["children"][0]["data"]["supplyCycleWeeks"] is None
