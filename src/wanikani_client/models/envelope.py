from typing import Generic, TypeVar

from pydantic import Field

from .base import WaniKaniModel
from .user import UserInformation

PayloadT = TypeVar("PayloadT")


class Envelope(WaniKaniModel, Generic[PayloadT]):
    """
    Top-level shape of every successful response.

    On the wire the two fields are ``user_information`` and
    ``requested_information``; dump with ``by_alias=True`` to get them back.
    """
    account_summary: UserInformation = Field(alias="user_information")
    payload: PayloadT = Field(alias="requested_information")
