"""
Chirper Backend — Message Route Handlers
==========================================

What:  Message CRUD endpoints plus the by-author listing.

    POST   /messages                        create
    GET    /messages                        list all
    GET    /messages/{messageId}            get one (empty body if missing)
    GET    /accounts/{accountId}/messages   list by author
    DELETE /messages/{messageId}            delete (1, or empty body if missing)
    PATCH  /messages/{messageId}            replace text (1)

Empty bodies:
    When the RequestHandler returns None the route answers 200 with no
    content at all (not JSON `null`), bypassing the response model.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Response

from app.dependencies import get_request_handler
from app.schemas.message import MessageCreate, MessageResponse, MessageTextUpdate
from app.services.request_handler import RequestHandler

router = APIRouter(tags=["Messages"])


def _or_empty(body: Optional[object]):
    if body is None:
        return Response(status_code=200)
    return body


@router.post(
    "/messages",
    response_model=MessageResponse,
    responses={
        200: {"description": "Message created", "model": MessageResponse},
        400: {"description": "Blank or over-long text, or unknown author"},
    },
    summary="Post a new message",
)
async def post_message(
    message: MessageCreate,
    handler: RequestHandler = Depends(get_request_handler),
) -> MessageResponse:
    return await handler.post_message(message)


@router.get(
    "/messages",
    response_model=List[MessageResponse],
    summary="List all messages",
)
async def list_messages(
    handler: RequestHandler = Depends(get_request_handler),
) -> List[MessageResponse]:
    return await handler.list_messages()


@router.get(
    "/messages/{message_id}",
    response_model=MessageResponse,
    responses={
        200: {"description": "The message, or an empty body if it does not exist"},
    },
    summary="Get a message by ID",
)
async def get_message(
    message_id: int,
    handler: RequestHandler = Depends(get_request_handler),
):
    return _or_empty(await handler.get_message(message_id))


@router.get(
    "/accounts/{account_id}/messages",
    response_model=List[MessageResponse],
    summary="List messages posted by an account",
)
async def list_messages_by_author(
    account_id: int,
    handler: RequestHandler = Depends(get_request_handler),
) -> List[MessageResponse]:
    return await handler.list_messages_by_author(account_id)


@router.delete(
    "/messages/{message_id}",
    response_model=int,
    responses={
        200: {"description": "Rows deleted (1), or an empty body if nothing matched"},
    },
    summary="Delete a message by ID",
)
async def delete_message(
    message_id: int,
    handler: RequestHandler = Depends(get_request_handler),
):
    return _or_empty(await handler.delete_message(message_id))


@router.patch(
    "/messages/{message_id}",
    response_model=int,
    responses={
        200: {"description": "Rows updated (1)"},
        400: {"description": "Message not found, or blank / over-long text"},
    },
    summary="Replace a message's text",
)
async def update_message(
    message_id: int,
    update: MessageTextUpdate,
    handler: RequestHandler = Depends(get_request_handler),
):
    return _or_empty(await handler.update_message(message_id, update.message_text))
