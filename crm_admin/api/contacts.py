from crm_admin.api.crud import build_crud_router
from crm_admin.core.services import employee_service, customer_service, supplier_service
from crm_admin.schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from crm_admin.schemas.customer import Customer, CustomerCreate, CustomerUpdate
from crm_admin.schemas.supplier import Supplier, SupplierCreate, SupplierUpdate

employees_router = build_crud_router("employees", employee_service, Employee, EmployeeCreate, EmployeeUpdate)
customers_router = build_crud_router("customers", customer_service, Customer, CustomerCreate, CustomerUpdate)
suppliers_router = build_crud_router("suppliers", supplier_service, Supplier, SupplierCreate, SupplierUpdate)
