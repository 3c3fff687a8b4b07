"""
Chirper Backend — Dependency Wiring
=====================================

What:  FastAPI dependencies that assemble the per-request object graph.
How:   Plain constructor composition:

           get_db_session ──▶ AccountGateway(session) ─┐
                          └─▶ MessageGateway(session) ─┴─▶ RequestHandler

       Tests swap the Store by overriding get_db_session, or replace the
       whole handler by overriding get_request_handler.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.gateways.account_gateway import AccountGateway
from app.gateways.message_gateway import MessageGateway
from app.services.request_handler import RequestHandler


async def get_request_handler(
    db: AsyncSession = Depends(get_db_session),
) -> RequestHandler:
    return RequestHandler(
        accounts=AccountGateway(db),
        messages=MessageGateway(db),
    )
