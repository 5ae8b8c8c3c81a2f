from __future__ import annotations

import io
from datetime import datetime, timezone

import pandas as pd
from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from registry_api.core.deps import get_association_query, get_session
from registry_api.repositories.association import AssociationRepository
from registry_api.schemas.association import AssociationQuery

router = APIRouter(prefix="/reports", tags=["Reports"])

ASSOCIATION_COLUMNS = [
    "equipment_name",
    "component_name",
    "importance_level",
    "material_code",
    "spare_part_name",
    "specification",
    "manufacturer",
    "is_custom",
    "quantity",
    "supply_cycle_weeks",
]


def _export_dataframe(
    df: pd.DataFrame,
    filename_base: str,
    export_format: str,
) -> StreamingResponse:
    """
    Convert DataFrame to the requested format and return a StreamingResponse.

    Supported formats:
      - csv: text/csv
      - xlsx: application/vnd.openxmlformats-officedocument.spreadsheetml.sheet
      - pdf: application/pdf (simple tabular rendering)
    """
    export_format = (export_format or "csv").lower()

    if export_format == "xlsx":
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="Report")
        buffer.seek(0)
        headers = {"Content-Disposition": f'attachment; filename="{filename_base}.xlsx"'}
        return StreamingResponse(
            buffer,
            media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            headers=headers,
        )

    if export_format == "pdf":
        from reportlab.lib import colors
        from reportlab.lib.pagesizes import A4, landscape
        from reportlab.lib.styles import getSampleStyleSheet
        from reportlab.platypus import Paragraph, SimpleDocTemplate, Table, TableStyle

        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer, pagesize=landscape(A4), leftMargin=18, rightMargin=18, topMargin=18, bottomMargin=18
        )
        styles = getSampleStyleSheet()
        stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
        elements: list = [Paragraph(f"{filename_base.replace('_', ' ').title()} ({stamp})", styles["Title"])]

        data = [list(df.columns)] + df.astype(str).values.tolist()
        table = Table(data, repeatRows=1)
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
                    ("ALIGN", (0, 0), (-1, -1), "LEFT"),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 7),
                    ("BOTTOMPADDING", (0, 0), (-1, 0), 6),
                    ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                ]
            )
        )
        elements.append(table)
        doc.build(elements)
        buffer.seek(0)
        headers = {"Content-Disposition": f'attachment; filename="{filename_base}.pdf"'}
        return StreamingResponse(buffer, media_type="application/pdf", headers=headers)

    buffer = io.StringIO()
    df.to_csv(buffer, index=False)
    buffer.seek(0)
    headers = {"Content-Disposition": f'attachment; filename="{filename_base}.csv"'}
    return StreamingResponse(buffer, media_type="text/csv", headers=headers)


# PUBLIC_INTERFACE
@router.get(
    "/associations",
    summary="Association report",
    description="Exports the advanced association query (same filters as /api/associations).",
    response_description="File stream (CSV/XLSX/PDF)",
)
async def association_report(
    query: AssociationQuery = Depends(get_association_query),
    session: AsyncSession = Depends(get_session),
    format: str = Query("csv", pattern="^(csv|xlsx|pdf)$", description="Export format: csv | xlsx | pdf"),
):
    """
    Generate the spare part association report.

    One line per association with its equipment, component, spare part and the
    shortest supply cycle among the part's suppliers.
    """
    rows = await AssociationRepository(session).list_associations(query)
    data = []
    for row in rows:
        item = row._mapping
        data.append(
            {
                "equipment_name": item["equipment_name"],
                "component_name": item["component_name"],
                "importance_level": getattr(item["importance_level"], "value", item["importance_level"]),
                "material_code": item["material_code"],
                "spare_part_name": item["spare_part_name"],
                "specification": item["specification"],
                "manufacturer": item["manufacturer"],
                "is_custom": bool(item["is_custom"]),
                "quantity": int(item["quantity"]),
                "supply_cycle_weeks": item["supply_cycle_weeks"],
            }
        )
    df = pd.DataFrame(data, columns=ASSOCIATION_COLUMNS)
    return _export_dataframe(df, "spare_part_associations", format)
