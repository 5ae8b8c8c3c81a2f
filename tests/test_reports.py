import csv
import io


async def test_association_report_csv(client, seeded):
    resp = await client.get("/api/reports/associations", params={"equipmentId": "1"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert "spare_part_associations.csv" in resp.headers["content-disposition"]

    rows = list(csv.DictReader(io.StringIO(resp.text)))
    assert len(rows) == 3
    assert {r["equipment_name"] for r in rows} == {"Press P-01"}
    assert rows[0]["importance_level"] == "A"


async def test_association_report_xlsx(client, seeded):
    resp = await client.get("/api/reports/associations", params={"format": "xlsx"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    # xlsx is a zip container
    assert resp.content[:2] == b"PK"


async def test_association_report_pdf(client, seeded):
    resp = await client.get("/api/reports/associations", params={"format": "pdf"})
    assert resp.status_code == 200
    assert resp.content.startswith(b"%PDF")


async def test_association_report_unknown_format(client):
    resp = await client.get("/api/reports/associations", params={"format": "doc"})
    assert resp.status_code == 400
