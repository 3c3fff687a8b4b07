"""
Chirper Backend — Message Request/Response Schemas
====================================================

What:  Pydantic models for the message JSON contract.
How:   camelCase JSON keys (`messageId`, `postedBy`, `messageText`,
       `timePostedEpoch`) via the `to_camel` alias generator.

Length and blank checks are NOT expressed as Field constraints here: a
violation has to surface as a 400 from the RequestHandler, not as
FastAPI's 422.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MessageCreate(BaseModel):
    """
    What:  Request body for POST /messages.
    """
    posted_by: Optional[int] = Field(default=None, description="accountId of the author")
    message_text: str = Field(default="", description="1-255 characters, not blank")
    time_posted_epoch: Optional[int] = Field(
        default=None,
        description="Opaque client timestamp, stored and echoed back",
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageTextUpdate(BaseModel):
    """
    What:  Request body for PATCH /messages/{messageId}.

    Only `messageText` is read; any other message fields in the body are
    ignored.
    """
    message_text: str = Field(default="", description="Replacement text")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    """
    What:  A persisted message.
    Who:   Returned by POST /messages, GET /messages, GET /messages/{id}
           and GET /accounts/{accountId}/messages.
    """
    message_id: int
    posted_by: int
    message_text: str
    time_posted_epoch: Optional[int] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
