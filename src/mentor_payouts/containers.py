"""Dependency container wiring for the application."""

from dataclasses import dataclass

from mentor_payouts.adapters.in_memory_repository import InMemoryDashboardRepository
from mentor_payouts.config import Settings
from mentor_payouts.domain.payouts import PayoutOptions
from mentor_payouts.services.auth import SignInService
from mentor_payouts.services.dashboard import DashboardService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    dashboard_service: DashboardService
    sign_in_service: SignInService
    payout_options: PayoutOptions


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    dashboard_service = DashboardService(InMemoryDashboardRepository())
    sign_in_service = SignInService(
        admin_email=resolved_settings.admin_email,
        password=resolved_settings.sign_in_password,
    )
    payout_options = PayoutOptions(
        platform_fee_percentage=resolved_settings.platform_fee_percentage,
        gst_percentage=resolved_settings.gst_percentage,
    )
    return AppContainer(
        settings=resolved_settings,
        dashboard_service=dashboard_service,
        sign_in_service=sign_in_service,
        payout_options=payout_options,
    )
