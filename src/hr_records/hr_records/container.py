from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .accounts.service import EmployeeAccountService
from .accounts.store_repository import StoreEmployeeAccountRepository
from .auth.service import AuthService
from .auth.store_repository import StoreAdminCredentialRepository
from .catalogs.definitions import ALL_CATALOGS, DEPARTMENTS, EDUCATION_LEVELS, POSITIONS, TITLES
from .catalogs.service import CatalogService
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .database.mysql_store import MySQLTableStore
from .database.store import TableStore
from .roster.repository import StorePersonnelRepository
from .roster.service import RosterService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]
    store: TableStore

    admins_repo: StoreAdminCredentialRepository
    accounts_repo: StoreEmployeeAccountRepository
    personnel_repo: StorePersonnelRepository

    auth_service: AuthService
    account_service: EmployeeAccountService
    catalog_services: Dict[str, CatalogService]
    roster_service: RosterService
    dashboard_service: DashboardService

    def catalog(self, slug: str) -> Optional[CatalogService]:
        return self.catalog_services.get(slug)


def build_container(*, db_config: Optional[dict] = None, store: Optional[TableStore] = None) -> Container:
    """Wire repositories and services.

    Pass ``store`` to run against something other than MySQL (tests use an
    in-memory store).
    """
    conn = None
    if store is None:
        if db_config is None:
            raise ValueError("db_config or store is required")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        store = MySQLTableStore(conn)

    admins_repo = StoreAdminCredentialRepository(store)
    accounts_repo = StoreEmployeeAccountRepository(store)
    personnel_repo = StorePersonnelRepository(store)

    catalog_services = {d.slug: CatalogService(store, d) for d in ALL_CATALOGS}

    auth_service = AuthService(admins_repo, accounts_repo)
    account_service = EmployeeAccountService(accounts_repo)
    roster_service = RosterService(
        personnel_repo,
        education=catalog_services[EDUCATION_LEVELS.slug],
        titles=catalog_services[TITLES.slug],
        departments=catalog_services[DEPARTMENTS.slug],
        positions=catalog_services[POSITIONS.slug],
    )
    dashboard_service = DashboardService(personnel_repo, catalog_services[EDUCATION_LEVELS.slug])

    return Container(
        conn=conn,
        store=store,
        admins_repo=admins_repo,
        accounts_repo=accounts_repo,
        personnel_repo=personnel_repo,
        auth_service=auth_service,
        account_service=account_service,
        catalog_services=catalog_services,
        roster_service=roster_service,
        dashboard_service=dashboard_service,
    )
