from enum import Enum
from pydantic import BaseModel, Field
from typing import Dict, List
from datetime import datetime

class ReportPeriod(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"

class SeriesPoint(BaseModel):
    name: str
    value: float = 0.0

class StatCards(BaseModel):
    total_revenue: float = 0.0
    customer_count: int = 0
    pending_invoices: int = 0
    total_expenses: float = 0.0

class DashboardResponse(BaseModel):
    stats: StatCards
    sales_trend: List[SeriesPoint] = []
    top_customers: List[SeriesPoint] = []
    invoice_status: Dict[str, int] = {}

class FinanceRow(BaseModel):
    name: str
    revenue: float = 0.0
    expenses: float = 0.0
    profit: float = 0.0

class FinanceTotals(BaseModel):
    revenue: float = 0.0
    expenses: float = 0.0
    profit: float = 0.0

class PerformancePoint(BaseModel):
    subject: str
    current: float
    previous: float
    full_mark: float = 100

class ReportMeta(BaseModel):
    generated_at: datetime = Field(default_factory=datetime.utcnow)
    report_id: str

class ReportResponse(BaseModel):
    period: ReportPeriod
    rows: List[FinanceRow] = []
    totals: FinanceTotals
    customer_segments: List[SeriesPoint] = []
    performance: List[PerformancePoint] = []
    meta: ReportMeta
