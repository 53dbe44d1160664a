"""Mini README: FastAPI economy API for Trustless Holdings.

Structure:
    * create_application - application factory wiring routes to a session.

Routes mirror the session: read both balances, add or remove money from the
bank or cash, and bring the overlay up. Amounts arrive as form fields and
are parsed as exact decimals. A negative or malformed amount is rejected
with 400; a withdrawal the balance cannot cover answers 409. The session
gets a final save when the application shuts down.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse

from ..configuration import get_settings
from ..economy import EconomySession
from ..finance import InvalidAmount
from ..host import HeadlessHost
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def _balances(session: EconomySession) -> Dict[str, str]:
    snapshot = session.snapshot()
    return {"bank": str(snapshot.bank), "cash": str(snapshot.cash)}


def create_application(session: Optional[EconomySession] = None) -> FastAPI:
    """Create the FastAPI application around ``session`` (or a configured one)."""

    if session is None:
        host = HeadlessHost()
        session = EconomySession.from_settings(
            get_settings(), renderer=host, sounds=host, notifier=host
        )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        LOGGER.info("Economy API shutting down, saving balances")
        session.shutdown()

    app = FastAPI(title="Trustless Holdings Economy", version="0.1.0", lifespan=lifespan)
    app.state.session = session

    def _move(operation, amount: str, short_message: Optional[str] = None) -> JSONResponse:
        try:
            outcome = operation(amount)
        except InvalidAmount as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        if outcome is False:
            raise HTTPException(status_code=409, detail=short_message)
        return JSONResponse(_balances(session))

    @app.get("/balances")
    async def balances() -> JSONResponse:
        """Return both balances as two-decimal strings."""

        return JSONResponse(_balances(session))

    @app.post("/bank/add")
    def bank_add(amount: str = Form(...)) -> JSONResponse:
        return _move(session.add_bank, amount)

    @app.post("/bank/remove")
    def bank_remove(amount: str = Form(...)) -> JSONResponse:
        return _move(session.remove_bank, amount, "Not enough balance in the bank.")

    @app.post("/cash/add")
    def cash_add(amount: str = Form(...)) -> JSONResponse:
        return _move(session.add_cash, amount)

    @app.post("/cash/remove")
    def cash_remove(amount: str = Form(...)) -> JSONResponse:
        return _move(session.remove_cash, amount, "Not enough cash.")

    @app.post("/overlay/show")
    def overlay_show() -> JSONResponse:
        """Bring up both balance lines on the overlay."""

        session.show_balances()
        LOGGER.debug("Overlay shown via API")
        return JSONResponse({"visible": session.is_ui_visible})

    return app
