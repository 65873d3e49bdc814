from fastapi import APIRouter
from hrms.api.v1.endpoints.auth import login, users
from hrms.api.v1.endpoints.dashboard import dashboard
from hrms.api.v1.endpoints.hr import benefits, compensations, contracts, documents, employees
from hrms.api.v1.endpoints.organization import chart, departments, positions
from hrms.api.v1.endpoints.workflow import workflow_instances, workflows

api_router = APIRouter()

# Authentication routes
api_router.include_router(login.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])

# Organization routes
api_router.include_router(departments.router, prefix="/departments", tags=["Organization"])
api_router.include_router(positions.router, prefix="/positions", tags=["Organization"])
api_router.include_router(chart.router, prefix="/organization", tags=["Organization"])

# HR routes
api_router.include_router(employees.router, prefix="/employees", tags=["Human Resource"])
api_router.include_router(contracts.router, prefix="/contracts", tags=["Human Resource"])
api_router.include_router(documents.router, prefix="/documents", tags=["Human Resource"])
api_router.include_router(compensations.router, prefix="/compensations", tags=["Human Resource"])
api_router.include_router(benefits.router, prefix="/benefits", tags=["Human Resource"])

# Workflow routes
api_router.include_router(workflows.router, prefix="/workflows", tags=["Workflow"])
api_router.include_router(workflow_instances.router, prefix="/workflow-instances", tags=["Workflow"])

# Dashboard routes
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
