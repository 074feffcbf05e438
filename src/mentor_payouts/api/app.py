"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status

from mentor_payouts.api.admin import router as admin_router
from mentor_payouts.api.models import PayoutRequest, SignInRequest
from mentor_payouts.app_logging import configure_logging
from mentor_payouts.containers import AppContainer
from mentor_payouts.domain.payouts import AdditionalCharge, PayoutOptions
from mentor_payouts.domain.sessions import Session
from mentor_payouts.services.payouts import calculate_breakdown


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Mentor Payouts")
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/auth/sign-in")
    async def sign_in(payload: SignInRequest, request: Request) -> dict[str, str]:
        """Check demo credentials and return the dashboard role."""
        state_container: AppContainer = request.app.state.container
        role = state_container.sign_in_service.authenticate(
            payload.email, payload.password
        )
        if role is None:
            logger.info("Sign-in rejected")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid email or password",
            )
        return {"role": role.value}

    @app.post("/payouts/calculate")
    async def calculate(payload: PayoutRequest, request: Request) -> dict[str, object]:
        """Price a set of sessions with fee, GST and extra deductions."""
        state_container: AppContainer = request.app.state.container
        options = _payout_options(payload, state_container.payout_options)
        sessions = [Session(**item.model_dump()) for item in payload.sessions]
        return {"breakdown": calculate_breakdown(sessions, options)}

    return app


def _payout_options(payload: PayoutRequest, defaults: PayoutOptions) -> PayoutOptions:
    """Merge request overrides onto the configured options."""
    provided = payload.model_fields_set
    return PayoutOptions(
        platform_fee_percentage=(
            payload.platform_fee_percentage
            if "platform_fee_percentage" in provided
            else defaults.platform_fee_percentage
        ),
        gst_percentage=(
            payload.gst_percentage
            if "gst_percentage" in provided
            else defaults.gst_percentage
        ),
        additional_charges=tuple(
            AdditionalCharge(name=charge.name, amount=charge.amount)
            for charge in payload.additional_charges
        ),
    )
