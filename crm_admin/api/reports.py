from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import StreamingResponse
from crm_admin.core.analytics import build_dashboard, build_report
from crm_admin.schemas.report import DashboardResponse, ReportResponse, ReportPeriod
from crm_admin.schemas.audit import AuditLogEntry, AuditStatus, AuditAction
from crm_admin.core.audit import audit_repo
import logging
import io
import hashlib
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib import colors

router = APIRouter()
logger = logging.getLogger(__name__)

def parse_period(period: str) -> ReportPeriod:
    try:
        return ReportPeriod(period)
    except ValueError:
        allowed = ", ".join(p.value for p in ReportPeriod)
        raise HTTPException(status_code=400, detail=f"Invalid period '{period}'. Use one of: {allowed}")

@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard():
    return await build_dashboard()

@router.get("/reports", response_model=ReportResponse)
async def get_report(period: str = Query(ReportPeriod.MONTHLY.value)):
    logger.info(f"JSON Report requested for period: {period}")
    return build_report(parse_period(period))

@router.get("/reports/pdf")
async def get_report_pdf(period: str = Query(ReportPeriod.MONTHLY.value)):
    logger.info(f"PDF Report Generation STARTED for period: {period}")
    report = build_report(parse_period(period))

    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4)
    styles = getSampleStyleSheet()
    elements = []

    # 1. Header
    elements.append(Paragraph("Business Performance Report", styles['Title']))
    elements.append(Spacer(1, 12))
    elements.append(Paragraph(f"<b>Period:</b> {report.period.value.capitalize()}", styles['Normal']))
    elements.append(Paragraph(f"<b>Report ID:</b> {report.meta.report_id}", styles['Normal']))
    elements.append(Paragraph(f"<b>Generated:</b> {report.meta.generated_at.strftime('%Y-%m-%d %H:%M:%S')}", styles['Normal']))
    elements.append(Spacer(1, 24))

    # 2. Totals
    elements.append(Paragraph("Totals", styles['Heading2']))
    totals_data = [
        ["Metric", "Value"],
        ["Total Revenue", f"{report.totals.revenue:,.2f}"],
        ["Total Expenses", f"{report.totals.expenses:,.2f}"],
        ["Total Profit", f"{report.totals.profit:,.2f}"],
    ]
    totals_table = Table(totals_data, colWidths=[200, 150])
    totals_table.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), colors.navy),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
        ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
        ('GRID', (0, 0), (-1, -1), 0.5, colors.grey)
    ]))
    elements.append(totals_table)
    elements.append(Spacer(1, 24))

    # 3. Breakdown
    elements.append(Paragraph("Breakdown", styles['Heading2']))
    rows_data = [["Period", "Revenue", "Expenses", "Profit"]]
    for row in report.rows:
        rows_data.append([row.name, f"{row.revenue:,.2f}", f"{row.expenses:,.2f}", f"{row.profit:,.2f}"])
    rows_table = Table(rows_data, colWidths=[100, 100, 100, 100])
    rows_table.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), colors.navy),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
        ('ALIGN', (1, 1), (-1, -1), 'RIGHT'),
        ('GRID', (0, 0), (-1, -1), 0.5, colors.grey)
    ]))
    elements.append(rows_table)

    # 4. Footer
    elements.append(Spacer(1, 48))
    footer_text = "Figures are generated from demo data and are for internal review only."
    elements.append(Paragraph(footer_text, ParagraphStyle(name='Footer', fontSize=8, textColor=colors.grey, alignment=1)))

    try:
        doc.build(elements)
    except Exception as e:
        logger.error(f"PDF Build Failed: {str(e)}")
        raise HTTPException(status_code=500, detail="PDF generation failed during document build.")

    pdf_bytes = buffer.getvalue()

    audit_repo.save(AuditLogEntry(
        endpoint="/reports/pdf",
        method="GET",
        action_type=AuditAction.PDF_DOWNLOAD,
        output_hash=hashlib.sha256(pdf_bytes).hexdigest(),
        status=AuditStatus.SUCCESS
    ))

    buffer.seek(0)
    return StreamingResponse(
        buffer,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=Report_{report.period.value}.pdf",
            "Content-Length": str(len(pdf_bytes))
        }
    )
