import logging
from datetime import date
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from hrms.models.auth.user import User
from hrms.models.hr.contract import Contract
from hrms.models.hr.employee import Employee
from hrms.models.organization.department import Department
from hrms.models.organization.position import Position
from hrms.models.shared.enums import (
    ContractStatus,
    ContractType,
    EmployeeStatus,
    UserRole,
    WorkflowStatus,
)
from hrms.models.workflow.workflow import Workflow
from hrms.models.workflow.workflow_instance import WorkflowInstance
from hrms.utils.date_time import utc_now

logger = logging.getLogger(__name__)

DEPARTMENTS = [
    {"name": "Executive", "description": "Executive leadership team"},
    {"name": "Human Resources", "description": "HR department"},
    {"name": "Engineering", "description": "Engineering department"},
    {"name": "Design", "description": "Design department"},
    {"name": "Marketing", "description": "Marketing department"},
    {"name": "Finance", "description": "Finance department"},
]

# (key, title, department name, payscale min, payscale max)
POSITIONS = [
    ("ceo", "Chief Executive Officer", "Executive", 150000, 300000),
    ("cto", "Chief Technology Officer", "Executive", 140000, 250000),
    ("coo", "Chief Operations Officer", "Executive", 140000, 250000),
    ("cfo", "Chief Financial Officer", "Executive", 140000, 250000),
    ("hr_manager", "HR Manager", "Human Resources", 90000, 120000),
    ("fullstack", "Full Stack Developer", "Engineering", 80000, 130000),
    ("ux", "UX Designer", "Design", 75000, 110000),
    ("marketing", "Marketing Specialist", "Marketing", 65000, 95000),
    ("finance", "Financial Analyst", "Finance", 70000, 100000),
]

# (key, first, last, phone, position key, manager key, hire date, status)
EMPLOYEES = [
    ("ceo", "Sarah", "Chen", "555-123-4567", "ceo", None, date(2020, 1, 15), EmployeeStatus.ACTIVE),
    ("cto", "Michael", "Rodriguez", "555-234-5678", "cto", "ceo", date(2020, 2, 1), EmployeeStatus.ACTIVE),
    ("coo", "Jennifer", "Smith", "555-345-6789", "coo", "ceo", date(2020, 2, 15), EmployeeStatus.ACTIVE),
    ("cfo", "David", "Johnson", "555-456-7890", "cfo", "ceo", date(2020, 3, 1), EmployeeStatus.ACTIVE),
    ("hr_manager", "John", "Doe", "555-567-8901", "hr_manager", "coo", date(2020, 3, 15), EmployeeStatus.ACTIVE),
    ("developer", "Alex", "Kim", "555-678-9012", "fullstack", "cto", date(2023, 10, 15), EmployeeStatus.ACTIVE),
    ("designer", "Maria", "Lopez", "555-789-0123", "ux", "cto", date(2023, 10, 12), EmployeeStatus.ONBOARDING),
    ("marketing", "James", "Taylor", "555-890-1234", "marketing", "coo", date(2023, 10, 5), EmployeeStatus.ACTIVE),
    ("finance", "Rebecca", "Park", "555-901-2345", "finance", "cfo", date(2023, 9, 28), EmployeeStatus.ACTIVE),
]

# (employee key, contract type, start date, salary, extra fields)
CONTRACTS = [
    ("ceo", ContractType.PERMANENT, date(2020, 1, 15), 250000, {}),
    ("cto", ContractType.PERMANENT, date(2020, 2, 1), 200000, {}),
    ("coo", ContractType.PERMANENT, date(2020, 2, 15), 200000, {}),
    ("cfo", ContractType.PERMANENT, date(2020, 3, 1), 200000, {}),
    ("hr_manager", ContractType.PERMANENT, date(2020, 3, 15), 110000, {}),
    ("developer", ContractType.PERMANENT, date(2023, 10, 15), 95000, {}),
    ("designer", ContractType.TEMPORARY, date(2023, 10, 12), 85000, {"end_date": date(2024, 10, 12)}),
    ("marketing", ContractType.PERMANENT, date(2023, 10, 5), 75000, {}),
    ("finance", ContractType.PERMANENT, date(2023, 9, 28), 80000, {"renewal_date": date(2023, 11, 15)}),
]


async def create_initial_data(session: AsyncSession):
    """Load the sample organization into an empty store"""
    try:
        existing = await session.execute(select(func.count(Employee.id)))
        if existing.scalar():
            logger.info("📋 Store already has employees, skipping sample data")
            return False

        logger.info("📋 Creating initial data...")

        await create_hr_manager_user(session)
        departments = await create_initial_departments(session)
        positions = await create_initial_positions(session, departments)
        employees = await create_initial_employees(session, positions)
        await create_initial_contracts(session, employees)
        await create_initial_workflows(session, employees, positions)

        await session.commit()
        logger.info("✅ Initial data created successfully")
        return True

    except Exception as e:
        logger.error(f"❌ Error creating initial data: {str(e)}")
        await session.rollback()
        raise


async def create_hr_manager_user(session: AsyncSession):
    result = await session.execute(select(User).where(User.username == "hrmanager"))
    if result.scalar_one_or_none() is None:
        session.add(
            User(
                username="hrmanager",
                password="password123",
                role=UserRole.HR_MANAGER.value,
                employee_id=None,
                is_active=True,
            )
        )
        logger.info("Created HR manager user: hrmanager")


async def create_initial_departments(session: AsyncSession) -> dict:
    departments = {}
    for dept_data in DEPARTMENTS:
        department = Department(parent_id=None, **dept_data)
        session.add(department)
        departments[dept_data["name"]] = department
    await session.flush()
    logger.info(f"Created {len(departments)} departments")
    return departments


async def create_initial_positions(session: AsyncSession, departments: dict) -> dict:
    positions = {}
    for key, title, department_name, payscale_min, payscale_max in POSITIONS:
        position = Position(
            title=title,
            description=f"{title} position",
            department_id=departments[department_name].id,
            payscale_min=payscale_min,
            payscale_max=payscale_max,
        )
        session.add(position)
        positions[key] = position
    await session.flush()
    logger.info(f"Created {len(positions)} positions")
    return positions


async def create_initial_employees(session: AsyncSession, positions: dict) -> dict:
    employees = {}
    # Managers come first in the list, so their ids exist before their reports
    for key, first_name, last_name, phone, position_key, manager_key, hire_date, status in EMPLOYEES:
        employee = Employee(
            first_name=first_name,
            last_name=last_name,
            email=f"{first_name.lower()}.{last_name.lower()}@example.com",
            phone=phone,
            position_id=positions[position_key].id,
            manager_id=employees[manager_key].id if manager_key else None,
            hire_date=hire_date,
            status=status.value,
        )
        session.add(employee)
        await session.flush()
        employees[key] = employee
    logger.info(f"Created {len(employees)} employees")
    return employees


async def create_initial_contracts(session: AsyncSession, employees: dict):
    for employee_key, contract_type, start_date, salary, extra in CONTRACTS:
        session.add(
            Contract(
                employee_id=employees[employee_key].id,
                contract_type=contract_type.value,
                start_date=start_date,
                salary=salary,
                status=ContractStatus.ACTIVE.value,
                **extra,
            )
        )
    await session.flush()
    logger.info(f"Created {len(CONTRACTS)} contracts")


async def create_initial_workflows(session: AsyncSession, employees: dict, positions: dict):
    hr_manager = employees["hr_manager"].id
    onboarding = Workflow(
        name="Employee Onboarding",
        description="Process for onboarding new employees",
        steps=[
            {"id": 1, "name": "Document Collection", "approver": hr_manager},
            {"id": 2, "name": "Equipment Setup", "approver": employees["cto"].id},
            {"id": 3, "name": "Training Assignment", "approver": None},
        ],
        created_by=hr_manager,
    )
    promotion = Workflow(
        name="Promotion Request",
        description="Process for requesting employee promotions",
        steps=[
            {"id": 1, "name": "Manager Approval", "approver": None},
            {"id": 2, "name": "HR Review", "approver": hr_manager},
            {"id": 3, "name": "Executive Approval", "approver": employees["ceo"].id},
        ],
        created_by=hr_manager,
    )
    session.add_all([onboarding, promotion])
    await session.flush()

    designer = employees["designer"].id
    now = utc_now()
    session.add_all([
        WorkflowInstance(
            workflow_id=onboarding.id,
            employee_id=designer,
            current_step=1,
            status=WorkflowStatus.PENDING.value,
            data={
                "start_date": "2023-10-12",
                "manager": employees["cto"].id,
                "documents": ["ID", "Resume", "Education"],
            },
            created_at=now,
            updated_at=now,
        ),
        WorkflowInstance(
            workflow_id=promotion.id,
            employee_id=designer,
            current_step=0,
            status=WorkflowStatus.PENDING.value,
            data={
                "current_position": positions["ux"].id,
                "requested_position": "Senior UX Designer",
                "reason": "Outstanding performance on recent projects",
            },
            created_at=now,
            updated_at=now,
        ),
    ])
    await session.flush()
    logger.info("Created 2 workflows with 2 pending instances")
