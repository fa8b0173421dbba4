"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import flet as ft
import requests

from ..config import BaseConfig
from ..infra.api_client import ApiClient, create_api_client
from ..infra.repositories import (
    ApiAdvanceRepository,
    ApiFuelRepository,
    ApiMaintenanceRepository,
    ApiTripRepository,
)
from .coordinator import ScreenCoordinator


@dataclass
class AppContext:
    """Centralized application context with services and state."""

    config: BaseConfig
    client: ApiClient

    trip_repo: ApiTripRepository
    maintenance_repo: ApiMaintenanceRepository
    fuel_repo: ApiFuelRepository
    advance_repo: ApiAdvanceRepository

    coordinator: ScreenCoordinator

    page: Optional[ft.Page] = None
    dev_mode: bool = False
    current_user: Optional[str] = None

    @property
    def authenticated(self) -> bool:
        return self.current_user is not None


def create_app_context(
    config: Optional[BaseConfig] = None, *, session: Optional[requests.Session] = None
) -> AppContext:
    """Create the context: API client, repositories and screen coordinator."""

    if config is None:
        config = BaseConfig()

    client = create_api_client(config, session=session)
    van_no = config.DEFAULT_VAN_NO
    trip_repo = ApiTripRepository(client, default_van_no=van_no)
    maintenance_repo = ApiMaintenanceRepository(client, default_van_no=van_no)
    fuel_repo = ApiFuelRepository(client, default_van_no=van_no)
    advance_repo = ApiAdvanceRepository(client, default_van_no=van_no)

    coordinator = ScreenCoordinator(
        {
            "trips": trip_repo,
            "maintenance": maintenance_repo,
            "fuel": fuel_repo,
            "advances": advance_repo,
        }
    )

    return AppContext(
        config=config,
        client=client,
        trip_repo=trip_repo,
        maintenance_repo=maintenance_repo,
        fuel_repo=fuel_repo,
        advance_repo=advance_repo,
        coordinator=coordinator,
        dev_mode=config.DEV_MODE,
    )
