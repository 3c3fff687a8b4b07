"""
Chirper Backend — Account Request/Response Schemas
====================================================

What:  Pydantic models for the account JSON contract.
How:   Python attributes are snake_case; JSON keys are camelCase
       (`accountId`) through the `to_camel` alias generator. FastAPI
       serializes response models by alias.

Missing `username` / `password` keys default to "" so that they reach the
business rules (blank username → 400, no match → 401) instead of failing
schema validation with a 422.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AccountCredentials(BaseModel):
    """
    What:  Request body for POST /register and POST /login.

    Keys other than `username` and `password` (an `accountId`, say) are
    dropped; ids are assigned by the store.
    """
    username: str = Field(default="", description="Unique, non-blank username")
    password: str = Field(default="", description="Plain password, at least 4 characters")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AccountResponse(BaseModel):
    """
    What:  A persisted account as returned by /register and /login.
    """
    account_id: int = Field(description="Store-assigned account identifier")
    username: str
    password: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
