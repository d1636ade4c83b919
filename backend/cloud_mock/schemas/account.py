"""Account Schemas."""

from pydantic import BaseModel


class AccountTrust(BaseModel):
    direct_trust: bool
    external_trust: bool
    trust_all: bool


class Account(BaseModel):
    id: str
    trust: AccountTrust
