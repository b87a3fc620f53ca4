"""Random mock records loaded into the store at startup."""
import random
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from crm_admin.db.memory import generate_id
from crm_admin.core.invoices import recompute_invoice
from crm_admin.schemas.employee import Employee, IdType
from crm_admin.schemas.customer import Customer
from crm_admin.schemas.supplier import Supplier
from crm_admin.schemas.invoice import Invoice, InvoiceItem, InvoiceStatus
from crm_admin.schemas.receipt import Receipt
from crm_admin.schemas.feedback import Feedback, FeedbackStatus
from crm_admin.schemas.company import Company, CompanyStatus, Project, ProjectStatus
from crm_admin.schemas.account import User, UserStatus, UserRole, AccessRight

POSITIONS = ["Manager", "Developer", "Designer", "Sales", "Support"]
DEPARTMENTS = ["Engineering", "Marketing", "Sales", "Administration", "Finance"]
SUPPLIER_CATEGORIES = ["Office Supplies", "Electronics", "Raw Materials", "Services"]
PAYMENT_METHODS = ["Cash", "Alipay", "WeChat Pay", "Bank Card"]
ID_NO_PREFIXES = ["110101", "E00", "D1234", "X"]

# Monthly finance series behind the dashboard trend and the reports page
FINANCE_SERIES: List[Dict[str, Any]] = [
    {"name": "Jan", "revenue": 45000, "expenses": 25000, "profit": 20000},
    {"name": "Feb", "revenue": 52000, "expenses": 28000, "profit": 24000},
    {"name": "Mar", "revenue": 49000, "expenses": 27000, "profit": 22000},
    {"name": "Apr", "revenue": 63000, "expenses": 32000, "profit": 31000},
    {"name": "May", "revenue": 58000, "expenses": 30000, "profit": 28000},
    {"name": "Jun", "revenue": 71000, "expenses": 35000, "profit": 36000},
    {"name": "Jul", "revenue": 68000, "expenses": 34000, "profit": 34000},
    {"name": "Aug", "revenue": 75000, "expenses": 38000, "profit": 37000},
    {"name": "Sep", "revenue": 82000, "expenses": 41000, "profit": 41000},
    {"name": "Oct", "revenue": 79000, "expenses": 39000, "profit": 40000},
    {"name": "Nov", "revenue": 88000, "expenses": 43000, "profit": 45000},
    {"name": "Dec", "revenue": 94000, "expenses": 46000, "profit": 48000},
]

CUSTOMER_SEGMENTS = [
    {"name": "Individual", "value": 45},
    {"name": "Small Business", "value": 30},
    {"name": "Mid-size Business", "value": 15},
    {"name": "Enterprise", "value": 10},
]

PERFORMANCE = [
    {"subject": "Sales", "current": 90, "previous": 85},
    {"subject": "Customer Satisfaction", "current": 80, "previous": 90},
    {"subject": "Staff Efficiency", "current": 85, "previous": 75},
    {"subject": "Cost Control", "current": 70, "previous": 85},
    {"subject": "Market Share", "current": 75, "previous": 70},
    {"subject": "Project Completion", "current": 95, "previous": 80},
]

def _days_ago(rng: random.Random, max_days: int) -> str:
    return (date.today() - timedelta(days=rng.random() * max_days)).isoformat()

def _days_ahead(rng: random.Random, max_days: int) -> str:
    return (date.today() + timedelta(days=rng.random() * max_days)).isoformat()

def _fixed_days_ago(days: int) -> str:
    return (date.today() - timedelta(days=days)).isoformat()

def build_seed_data(seed: Optional[int] = None) -> Dict[str, List[Any]]:
    rng = random.Random(seed)
    taken = set()

    def new_id() -> str:
        record_id = generate_id(rng, taken)
        taken.add(record_id)
        return record_id

    id_types = list(IdType)
    employees = [
        Employee(
            id=new_id(),
            name=f"Employee {i + 1}",
            email=f"employee{i + 1}@example.com",
            phone=f"1380013800{i}",
            id_type=id_types[i % 4],
            id_no=f"{ID_NO_PREFIXES[i % 4]}{str(19900101 + i * 111111)[:8]}{str(1000 + i)[1:]}",
            position=POSITIONS[i % 5],
            department=DEPARTMENTS[i % 5],
            hire_date=_days_ago(rng, 365 * 3),
            salary=round(5000 + rng.random() * 15000, 2),
        )
        for i in range(10)
    ]

    customers = [
        Customer(
            id=new_id(),
            name=f"Customer {i + 1}",
            email=f"customer{i + 1}@example.com",
            phone=f"1390013900{i}",
            address=f"{i + 1} Chaoyang Street, Beijing",
            created_at=_days_ago(rng, 365),
            last_purchase=_days_ago(rng, 30),
            total_spent=round(100 + rng.random() * 9900, 2),
        )
        for i in range(15)
    ]

    suppliers = [
        Supplier(
            id=new_id(),
            name=f"Supplier {i + 1}",
            contact_person=f"Contact {i + 1}",
            email=f"supplier{i + 1}@example.com",
            phone=f"1370013700{i}",
            address=f"{i + 1} Pudong Road, Shanghai",
            category=SUPPLIER_CATEGORIES[i % 4],
            since=_days_ago(rng, 365 * 2),
        )
        for i in range(8)
    ]

    statuses = list(InvoiceStatus)
    invoices = []
    for i in range(12):
        customer = customers[i % len(customers)]
        items = [
            InvoiceItem(
                id=new_id(),
                description=f"Product {j + 1}",
                quantity=1 + rng.randrange(10),
                price=round(100 + rng.random() * 900, 2),
            )
            for j in range(1 + rng.randrange(4))
        ]
        invoices.append(recompute_invoice(Invoice(
            id=new_id(),
            customer_id=customer.id,
            customer_name=customer.name,
            date=_days_ago(rng, 90),
            due_date=_days_ago(rng, 60),
            items=items,
            status=statuses[i % 4],
        )))

    receipts = [
        Receipt(
            id=new_id(),
            customer_id=customers[i % len(customers)].id,
            customer_name=customers[i % len(customers)].name,
            date=_days_ago(rng, 30),
            amount=round(50 + rng.random() * 4950, 2),
            payment_method=PAYMENT_METHODS[i % 4],
            description=f"Purchase {i + 1}",
        )
        for i in range(15)
    ]

    feedback = [
        Feedback(id="fb001", title="Slow page loads",
                 description="The reports page takes a long time to load its data.",
                 created_at="2024-01-15", status=FeedbackStatus.REVIEWED),
        Feedback(id="fb002", title="Add an export option",
                 description="Please allow exporting the customer list to Excel.",
                 created_at="2024-01-18", status=FeedbackStatus.PENDING),
        Feedback(id="fb003", title="Invoice detail rendering issue",
                 description="Images do not show on the invoice detail view.",
                 created_at="2024-01-20", status=FeedbackStatus.RESOLVED),
    ]
    taken.update(fb.id for fb in feedback)

    companies = [
        Company(
            id=new_id(),
            code=f"COM{i + 1:03d}",
            name=f"Company {i + 1}",
            address=f"{i + 1} Haidian Street, Beijing",
            phone=f"010-8888{i:04d}",
            email=f"company{i + 1}@example.com",
            created_at=_days_ago(rng, 365),
            status=CompanyStatus.INACTIVE if i % 4 == 0 else CompanyStatus.ACTIVE,
        )
        for i in range(5)
    ]

    project_statuses = list(ProjectStatus)
    projects = [
        Project(
            id=new_id(),
            code=f"PRJ{i + 1:03d}",
            name=f"Project {i + 1}",
            company_id=companies[i % len(companies)].id,
            company_name=companies[i % len(companies)].name,
            start_date=_days_ago(rng, 180),
            end_date=_days_ahead(rng, 180),
            status=project_statuses[i % 3],
            description=f"Description of project {i + 1}",
        )
        for i in range(5)
    ]

    user_roles = [
        UserRole(id="role001", name="System Administrator", code="ADMIN",
                 description="Full access to every module",
                 permissions=["user.create", "user.read", "user.update", "user.delete",
                              "company.create", "company.read", "company.update", "company.delete"],
                 created_at=_fixed_days_ago(365)),
        UserRole(id="role002", name="Project Manager", code="PM",
                 description="Manages projects and team members",
                 permissions=["project.create", "project.read", "project.update", "user.read"],
                 created_at=_fixed_days_ago(300)),
        UserRole(id="role003", name="Standard User", code="USER",
                 description="Read-only access",
                 permissions=["project.read", "company.read"],
                 created_at=_fixed_days_ago(200)),
        UserRole(id="role004", name="Finance", code="FINANCE",
                 description="Manages financial records",
                 permissions=["invoice.create", "invoice.read", "invoice.update",
                              "receipt.create", "receipt.read", "receipt.update"],
                 created_at=_fixed_days_ago(250)),
    ]
    taken.update(role.id for role in user_roles)

    users = [
        User(
            id=new_id(),
            username=f"user{i + 1}",
            email=f"user{i + 1}@example.com",
            phone=f"1350013500{i}",
            company_id=companies[i % len(companies)].id,
            company_name=companies[i % len(companies)].name,
            role_id=user_roles[i % len(user_roles)].id,
            role_name=user_roles[i % len(user_roles)].name,
            status=UserStatus.INACTIVE if i % 5 == 0 else UserStatus.ACTIVE,
            created_at=_days_ago(rng, 365),
        )
        for i in range(5)
    ]

    access_rights = [
        AccessRight(id=new_id(), name=name, code=f"{module}.{action}",
                    description=description, module=module, action=action,
                    created_at=_fixed_days_ago(365))
        for name, module, action, description in [
            ("Create user", "user", "create", "Allows creating new users"),
            ("View users", "user", "read", "Allows viewing user details"),
            ("Update user", "user", "update", "Allows editing user details"),
            ("Delete user", "user", "delete", "Allows deleting users"),
            ("Create company", "company", "create", "Allows creating new companies"),
        ]
    ]

    return {
        "employees": employees,
        "customers": customers,
        "suppliers": suppliers,
        "invoices": invoices,
        "receipts": receipts,
        "feedback": feedback,
        "companies": companies,
        "projects": projects,
        "users": users,
        "user_roles": user_roles,
        "access_rights": access_rights,
    }
