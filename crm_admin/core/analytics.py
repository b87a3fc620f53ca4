import asyncio
import uuid
from typing import Dict, List

from crm_admin.core.services import customer_service, employee_service, invoice_service, receipt_service
from crm_admin.db.seed import CUSTOMER_SEGMENTS, FINANCE_SERIES, PERFORMANCE
from crm_admin.schemas.invoice import InvoiceStatus
from crm_admin.schemas.report import (
    DashboardResponse, FinanceRow, FinanceTotals, PerformancePoint, ReportMeta,
    ReportPeriod, ReportResponse, SeriesPoint, StatCards,
)

PENDING_STATUSES = (InvoiceStatus.SENT, InvoiceStatus.OVERDUE)

async def build_dashboard(top_n: int = 5) -> DashboardResponse:
    """
    Stat cards and charts for the dashboard, computed from the live store.
    Only reads existing records; nothing is written back.
    """
    invoices, receipts, customers, employees = await asyncio.gather(
        invoice_service.get_all(),
        receipt_service.get_all(),
        customer_service.get_all(),
        employee_service.get_all(),
    )

    paid_total = sum(inv.total_amount for inv in invoices if inv.status == InvoiceStatus.PAID)
    received_total = sum(rec.amount for rec in receipts)

    status_counts: Dict[str, int] = {status.value: 0 for status in InvoiceStatus}
    # Keyed by customer_id; customer_name is only a display copy
    invoiced_by_customer: Dict[str, float] = {}
    labels: Dict[str, str] = {}
    for inv in invoices:
        status_counts[inv.status.value] += 1
        invoiced_by_customer[inv.customer_id] = invoiced_by_customer.get(inv.customer_id, 0.0) + inv.total_amount
        labels[inv.customer_id] = inv.customer_name

    top_customers = sorted(
        invoiced_by_customer.items(), key=lambda kv: (-kv[1], labels[kv[0]], kv[0])
    )[:top_n]

    return DashboardResponse(
        stats=StatCards(
            total_revenue=round(paid_total + received_total, 2),
            customer_count=len(customers),
            pending_invoices=sum(1 for inv in invoices if inv.status in PENDING_STATUSES),
            total_expenses=round(sum(emp.salary for emp in employees), 2),
        ),
        sales_trend=[SeriesPoint(name=m["name"], value=m["revenue"]) for m in FINANCE_SERIES],
        top_customers=[SeriesPoint(name=labels[customer_id], value=round(total, 2)) for customer_id, total in top_customers],
        invoice_status=status_counts,
    )

def finance_rows(period: ReportPeriod) -> List[FinanceRow]:
    months = [FinanceRow(**m) for m in FINANCE_SERIES]
    if period == ReportPeriod.MONTHLY:
        return months[-6:]
    if period == ReportPeriod.QUARTERLY:
        quarters = []
        for q in range(4):
            chunk = months[q * 3:(q + 1) * 3]
            quarters.append(FinanceRow(
                name=f"Q{q + 1}",
                revenue=sum(m.revenue for m in chunk),
                expenses=sum(m.expenses for m in chunk),
                profit=sum(m.profit for m in chunk),
            ))
        return quarters
    return months

def build_report(period: ReportPeriod) -> ReportResponse:
    rows = finance_rows(period)
    return ReportResponse(
        period=period,
        rows=rows,
        totals=FinanceTotals(
            revenue=sum(r.revenue for r in rows),
            expenses=sum(r.expenses for r in rows),
            profit=sum(r.profit for r in rows),
        ),
        customer_segments=[SeriesPoint(**s) for s in CUSTOMER_SEGMENTS],
        performance=[PerformancePoint(**p) for p in PERFORMANCE],
        meta=ReportMeta(report_id=str(uuid.uuid4())),
    )
