# Gateways package init
"""
Chirper Backend — Store Gateways
==================================

What:  Thin translation layer between domain operations and the async
       SQLAlchemy session (the Store).
Why:   Keeps SQL out of the RequestHandler and gives it a small, mockable
       surface to test business rules against.

Gateway Inventory:
    - AccountGateway: find by username / credential pair / id, insert
    - MessageGateway: insert, find by id / all / author, delete, update text

Contract shared by both:
    - "No row" is returned as None (never raised)
    - A mutating call that touched zero rows is returned as None
    - Unexpected SQLAlchemy failures are wrapped in DatabaseError
    The RequestHandler decides what an absent value means.
"""

from app.gateways.account_gateway import AccountGateway
from app.gateways.message_gateway import MessageGateway

__all__ = ["AccountGateway", "MessageGateway"]
